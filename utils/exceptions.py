# utils/exceptions.py


class DataSourceUnavailable(RuntimeError):
    """The HTS reference table could not be fetched or parsed."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"HTS reference source '{source}' unavailable: {reason}")
        self.source = source
        self.reason = reason
