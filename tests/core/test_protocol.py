"""Tests for the solver wire format."""

import json

import pytest

from emodoku.core.errors import ProtocolError
from emodoku.core.givens import GivenGrid
from emodoku.core.protocol import (
    decode_request,
    decode_response,
    encode_request,
    encode_response,
)


class TestRequest:
    def test_nine_lines_without_seq(self) -> None:
        text = encode_request(GivenGrid())
        assert text == "---------\n" * 9
        assert all(len(line) == 9 for line in text.splitlines())

    def test_seq_header_first(self) -> None:
        grid = GivenGrid()
        grid.set(1, 1, 7)
        lines = encode_request(grid, seq=12).splitlines()
        assert lines[0] == "# seq 12"
        assert lines[1] == "7--------"
        assert len(lines) == 10

    def test_newline_terminated(self) -> None:
        assert encode_request(GivenGrid(), seq=1).endswith("-\n")

    def test_decode_round_trip(self) -> None:
        grid = GivenGrid()
        grid.set(5, 5, 5)
        grid.set(9, 1, 3)
        seq, decoded = decode_request(encode_request(grid, seq=4))
        assert seq == 4
        assert decoded == grid

    def test_decode_without_header(self) -> None:
        seq, decoded = decode_request("2-----459\n" + "---------\n" * 8)
        assert seq is None
        assert decoded.get(1, 9) == 9

    def test_decode_bad_header(self) -> None:
        with pytest.raises(ProtocolError):
            decode_request("# seq x\n" + "---------\n" * 9)

    def test_decode_short_grid(self) -> None:
        with pytest.raises(ProtocolError):
            decode_request("---------\n" * 3)


class TestResponse:
    def test_possibilities_and_seq(self, make_matrix) -> None:
        payload = json.dumps({"Seq": 3, "Possibilities": make_matrix({(1, 1): [2]})})
        response = decode_response(payload)
        assert response.seq == 3
        assert response.possibilities[0][0] == frozenset({2})
        assert response.possibilities[8][8] == frozenset(range(1, 10))

    def test_seq_is_optional(self, make_matrix) -> None:
        response = decode_response(json.dumps({"Possibilities": make_matrix()}))
        assert response.seq is None

    def test_extra_fields_ignored(self, make_matrix) -> None:
        payload = json.dumps({"Possibilities": make_matrix(), "Progress": 17})
        assert decode_response(payload).seq is None

    def test_bytes_payload(self, make_matrix) -> None:
        payload = json.dumps({"Seq": 1, "Possibilities": make_matrix()}).encode()
        assert decode_response(payload).seq == 1

    @pytest.mark.parametrize(
        "payload",
        [
            "not json",
            "[]",
            "{}",
            '{"Possibilities": []}',
            '{"Possibilities": null}',
        ],
    )
    def test_malformed(self, payload: str) -> None:
        with pytest.raises(ProtocolError):
            decode_response(payload)

    @pytest.mark.parametrize("seq", ["1", 1.5, True])
    def test_bad_seq(self, make_matrix, seq: object) -> None:
        payload = json.dumps({"Seq": seq, "Possibilities": make_matrix()})
        with pytest.raises(ProtocolError):
            decode_response(payload)

    def test_encode_response_matches_decoder(self, make_matrix) -> None:
        original = decode_response(
            json.dumps({"Possibilities": make_matrix({(2, 2): [9, 1]})})
        )
        again = decode_response(encode_response(original.possibilities, seq=8))
        assert again.seq == 8
        assert again.possibilities == original.possibilities
