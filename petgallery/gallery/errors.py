NO_MATCH_MESSAGE = "No matching breed found."


class PetGalleryError(Exception):
    """Base class for failures talking to the pet-image API.

    ``str(exc)`` is the detail shown to the user after the operation prefix.
    """


class NetworkFailure(PetGalleryError):
    pass


class HttpStatusError(PetGalleryError):
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP error! status: {status_code}")


class PayloadError(PetGalleryError):
    pass


class NoMatchFound(PetGalleryError):
    def __init__(self, term: str):
        self.term = term
        super().__init__(NO_MATCH_MESSAGE)
