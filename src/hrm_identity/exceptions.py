"""Identity infrastructure exceptions.

Domain-level errors live next to their aggregates
(hrm_identity.domain.*.exceptions); this module holds errors raised by
the persistence adapters.
"""


class StoreUnavailableError(Exception):
    """The credential store failed or did not answer in time.

    Transient from the caller's point of view: retrying the whole
    operation later is safe. Nothing in this package retries on its own.
    """

    def __init__(self, message: str = "Credential store unavailable"):
        self.message = message
        super().__init__(self.message)
