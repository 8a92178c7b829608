"""Controller interface."""

from abc import ABC, abstractmethod

from fastapi import APIRouter


class Controller(ABC):
    """Route handlers bundled with the path they serve."""

    path: str

    def __init__(self) -> None:
        """Initialize router and register routes."""
        self.router = APIRouter()
        self.initialize_routes()

    @abstractmethod
    def initialize_routes(self) -> None:
        """Register route handlers on ``self.router``."""
