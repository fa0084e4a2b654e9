from linebot.v3.webhook import SignatureValidator
from linebot.v3.messaging import AsyncApiClient, AsyncMessagingApi, Configuration, ReplyMessageRequest, TextMessage

from utils import logging

SUCCESS_MESSAGE = "「{word}」をNotionに追加しました ✅"
FAILURE_MESSAGE = "登録中にエラーが発生しました。もう一度お試しください。"


def verify_signature(channel_secret: str, body: str, signature: str) -> bool:
    if not signature:
        return False
    return SignatureValidator(channel_secret).validate(body, signature)


class LineReplier:
    def __init__(self, access_token: str):
        self.configuration = Configuration(access_token=access_token)

    async def reply_text(self, reply_token: str, text: str):
        logging.debug(f"Replying to {reply_token}: {text}")
        # aiohttp sessions need a running loop, so the client lives for one call
        async with AsyncApiClient(self.configuration) as api_client:
            api = AsyncMessagingApi(api_client)
            await api.reply_message(
                ReplyMessageRequest(reply_token=reply_token, messages=[TextMessage(text=text)])
            )
