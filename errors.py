class FlashcardError(Exception):
    """Base error carrying a message that can be shown to the user"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message}

class ValidationError(FlashcardError):
    """Required input is missing; raised before any request is made"""
    status_code = 400

class RequestInProgressError(FlashcardError):
    """Another generation request is still running for this session"""
    status_code = 409

class EmptyResultError(FlashcardError):
    """The model answered but no usable or new flashcards came out of it"""
    status_code = 422

class GenerationError(FlashcardError):
    """The model call failed or returned nothing"""
    status_code = 502
