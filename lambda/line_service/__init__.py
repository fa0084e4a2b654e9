from .line import LineReplier, verify_signature, SUCCESS_MESSAGE, FAILURE_MESSAGE

__all__ = ['LineReplier', 'verify_signature', 'SUCCESS_MESSAGE', 'FAILURE_MESSAGE']
