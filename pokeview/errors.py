# pokeview/errors.py


class PokeviewError(Exception):
    pass


class FetchError(PokeviewError):
    """Primary record could not be loaded for ``identifier``."""

    def __init__(self, identifier, message: str = ""):
        self.identifier = identifier
        super().__init__(message or f"could not fetch {identifier!r}")


class NetworkFailure(FetchError):
    def __init__(self, identifier, message: str = "", status_code: int | None = None):
        self.status_code = status_code
        super().__init__(identifier, message)


class MalformedResponse(FetchError):
    pass


class HeldItemsError(PokeviewError):
    pass


class PartialFailure(HeldItemsError):
    """At least one held-item lookup failed; ``failures`` is [(index, url, error)]."""

    def __init__(self, failures: list):
        self.failures = failures
        detail = ", ".join(f"#{i} {url}: {err}" for i, url, err in failures)
        super().__init__(f"{len(failures)} held item lookup(s) failed: {detail}")
