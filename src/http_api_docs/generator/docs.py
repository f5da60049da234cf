"""Document assembly: runs a formatter over every endpoint in order."""

from abc import ABC, abstractmethod

from http_api_docs.parser.base import Argument, Endpoint


class Formatter(ABC):
    """Produces the text blocks that make up an API reference document."""

    @abstractmethod
    def generate_intro(self) -> str: ...

    @abstractmethod
    def generate_index(self, endpoints: list[Endpoint]) -> str: ...

    @abstractmethod
    def generate_endpoint_block(self, endpoint: Endpoint) -> str: ...

    @abstractmethod
    def generate_arguments_block(self, arguments: list[Argument], options: list[Argument]) -> str: ...

    @abstractmethod
    def generate_body_block(self, arguments: list[Argument]) -> str: ...

    @abstractmethod
    def generate_response_block(self, response: str) -> str: ...

    @abstractmethod
    def generate_example_block(self, endpoint: Endpoint) -> str: ...


def generate_docs(endpoints: list[Endpoint], formatter: Formatter) -> str:
    """Render the full document: intro, index, then one section per endpoint."""
    parts = [formatter.generate_intro(), formatter.generate_index(endpoints)]
    for endpoint in endpoints:
        parts.append(formatter.generate_endpoint_block(endpoint))
        parts.append(formatter.generate_arguments_block(endpoint.arguments, endpoint.options))
        parts.append(formatter.generate_body_block(endpoint.arguments))
        parts.append(formatter.generate_response_block(endpoint.response))
        parts.append(formatter.generate_example_block(endpoint))
    return "".join(parts)
