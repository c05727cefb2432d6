class ExchangeRequestError(Exception):
    """Base error for a failed call to the exchange"""


class ExchangeTransportError(ExchangeRequestError):
    pass


class ExchangeDecodeError(ExchangeRequestError):
    pass


class ExchangeApiError(ExchangeRequestError):
    def __init__(self, code: int | None, message: str | None) -> None:
        super().__init__(f"exchange rejected request: code={code} message={message}")
        self.code = code
        self.message = message
