from dotenv import load_dotenv
load_dotenv()  # utils.logging reads LOG_LEVEL on import

from fastapi import FastAPI, Request, HTTPException, Depends
from fastapi.responses import JSONResponse
from mangum import Mangum
from models import WebhookRequest
from config import AppContext, Settings, create_context
import line_service
import time
from utils import logging
import word_service

settings = Settings.from_env()
context = create_context(settings)

# FASTAPI app and AWS Lambda handler
app = FastAPI()
handler = Mangum(app)

def get_context() -> AppContext:
    return context

@app.middleware("http")
async def log_requests(request: Request, call_next):
    logging.set_request_id()

    start_time = time.time()
    logging.info(f"Incoming request: {request.method} {request.url}")

    try:
        response = await call_next(request)

        process_time = time.time() - start_time
        logging.info(f"Completed request: {request.method} {request.url} with {response.status_code} in {process_time:.2f} seconds")

        return response
    finally:
        logging.clear_request_id()

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logging.exception(f"Unhandled exception at {request.method} {request.url.path} - {str(exc)}")

    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )

@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )

@app.post("/webhook")
async def webhook(request: Request, ctx: AppContext = Depends(get_context)):
    body = (await request.body()).decode("utf-8")

    channel_secret = ctx.settings.line_channel_secret
    if channel_secret:
        signature = request.headers.get("x-line-signature", "")
        if not line_service.verify_signature(channel_secret, body, signature):
            logging.warning("Rejected webhook call with invalid signature")
            raise HTTPException(status_code=401, detail="Invalid signature")

    try:
        payload = WebhookRequest.model_validate_json(body)
        await word_service.handle_events(payload.events, ctx)
    except Exception as e:
        logging.exception(f"Webhook error: {str(e)}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
