"""Wire format between the editor and the solver service.

Request (client -> solver), plain text::

    # seq 12
    2-----459
    ---------
    ...            (nine rows, each newline-terminated)

The ``# seq`` header is a comment line in the solver's puzzle text format,
so a solver that ignores it still reads the grid.

Response (solver -> client), JSON::

    {"Seq": 12, "Possibilities": [[[2], [1, 3, 6], ...], ...]}
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from emodoku.core.errors import ProtocolError
from emodoku.core.givens import GivenGrid
from emodoku.core.possibilities import Matrix, build_matrix

SEQ_HEADER = "# seq "


@dataclass(frozen=True)
class SolverResponse:
    """A decoded solver reply.

    ``seq`` is ``None`` when the solver did not echo a sequence number.
    """

    seq: int | None
    possibilities: Matrix


def encode_request(givens: GivenGrid, seq: int | None = None) -> str:
    """Serialise *givens* (and optional sequence header) for the solver."""
    lines = givens.rows()
    if seq is not None:
        lines.insert(0, f"{SEQ_HEADER}{seq}")
    return "\n".join(lines) + "\n"


def decode_request(text: str) -> tuple[int | None, GivenGrid]:
    """Parse a request produced by :func:`encode_request`."""
    lines = text.splitlines()
    seq: int | None = None
    if lines and lines[0].startswith(SEQ_HEADER):
        try:
            seq = int(lines[0][len(SEQ_HEADER) :])
        except ValueError as exc:
            raise ProtocolError(f"Invalid sequence header: {lines[0]!r}") from exc
        lines = lines[1:]
    try:
        return seq, GivenGrid.from_rows(lines)
    except ValueError as exc:
        raise ProtocolError(str(exc)) from exc


def decode_response(payload: str | bytes) -> SolverResponse:
    """Parse a solver JSON reply.

    Raises:
        ProtocolError: the payload is not JSON, is not an object, lacks
            ``Possibilities`` or carries a malformed ``Seq``.
    """
    try:
        data = json.loads(payload)
    except (TypeError, ValueError) as exc:
        raise ProtocolError(f"Response is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ProtocolError("Response must be a JSON object")
    if "Possibilities" not in data:
        raise ProtocolError("Response has no Possibilities field")

    seq = data.get("Seq")
    if seq is not None and (isinstance(seq, bool) or not isinstance(seq, int)):
        raise ProtocolError(f"Invalid Seq field: {seq!r}")

    return SolverResponse(seq=seq, possibilities=build_matrix(data["Possibilities"]))


def encode_response(possibilities: Matrix, seq: int | None = None) -> str:
    """Build a JSON reply in the solver's format (used by tools and tests)."""
    data: dict[str, object] = {
        "Possibilities": [[sorted(cell) for cell in row] for row in possibilities]
    }
    if seq is not None:
        data["Seq"] = seq
    return json.dumps(data)
