"""Chain of responsibility: requests pass along handlers by value range."""

from __future__ import annotations

from typing import Optional


class UnhandledRequestError(LookupError):
    """No handler in the chain accepts the request."""


class Handler:
    """Handles requests in (lower, upper]; passes others to its successor."""

    lower: Optional[int] = None
    upper: int = 0
    template = "{}"

    def __init__(self) -> None:
        self.successor: Optional[Handler] = None

    def set_successor(self, successor: Handler) -> Handler:
        """Link ``successor`` after this handler and return it."""
        self.successor = successor
        return successor

    def _accepts(self, request: int) -> bool:
        above = self.lower is None or request > self.lower
        return above and request <= self.upper

    def handle_request(self, request: int) -> str:
        """Handle ``request`` here or further down the chain; return the message."""
        if self._accepts(request):
            message = self.template.format(request)
            print(message)
            return message
        if self.successor is None:
            raise UnhandledRequestError(f"no handler for request {request}")
        return self.successor.handle_request(request)


class LowHandler(Handler):
    lower = None
    upper = 10
    template = "I am handler1 , handling the request : {}"


class MidHandler(Handler):
    lower = 10
    upper = 20
    template = "I am handler2 , handling the  :{}"


class HighHandler(Handler):
    lower = 20
    upper = 30
    template = "I am handler3 , handling the request : {}"


def build_chain() -> Handler:
    """Return the head of the low -> mid -> high chain."""
    head = LowHandler()
    head.set_successor(MidHandler()).set_successor(HighHandler())
    return head


def main(argv: Optional[list] = None) -> int:
    chain = build_chain()
    for request in (1, 3, 23, 12, 5, 6, 16, 13, 11, 23, 22, 27, 3):
        chain.handle_request(request)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())