"""Documentation comments attached to symbols."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class DocCommentContract:
    """A contract line of a doc comment; ``name`` starts with ``@``."""

    name: str
    body: str


@dataclass
class DocComment:
    """A doc comment: free text plus its contracts."""

    body: str
    contracts: list[DocCommentContract] = field(default_factory=list)

    def add_contracts(self, contracts: Iterable[DocCommentContract]) -> None:
        """Append contracts to this comment."""
        self.contracts.extend(contracts)

    def has_contracts(self) -> bool:
        """Tell whether the comment has any contracts."""
        return bool(self.contracts)

    def display_body_with_contracts(self) -> str:
        """Render the body and contracts as markdown."""
        out = self.body
        for contract in self.contracts:
            if out:
                out += "\n\n"
            out += "**" + contract.name + "**"
            if contract.body:
                out += " " + contract.body
        return out


class DocCommentBuilder:
    """Fluent construction of a :class:`DocComment`."""

    def __init__(self, body: str) -> None:
        self._doc_comment = DocComment(body)

    def with_contract(self, name: str, body: str) -> DocCommentBuilder:
        self._doc_comment.contracts.append(DocCommentContract(name, body))
        return self

    def build(self) -> DocComment:
        """Return a fresh copy of the comment built so far."""
        return DocComment(self._doc_comment.body, list(self._doc_comment.contracts))