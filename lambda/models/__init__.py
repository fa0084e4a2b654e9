from .models import Entry, Example, parse_entry, entry_json_schema, TextMessageContent, OtherMessageContent, MessageEvent, OtherEvent, InboundEvent, WebhookRequest

__all__ = ['Entry', 'Example', 'parse_entry', 'entry_json_schema', 'TextMessageContent', 'OtherMessageContent', 'MessageEvent', 'OtherEvent',
           'InboundEvent', 'WebhookRequest']
