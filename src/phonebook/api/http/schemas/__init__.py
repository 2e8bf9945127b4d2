from .contact import ContactResponse, ErrorResponse

__all__ = ["ContactResponse", "ErrorResponse"]
