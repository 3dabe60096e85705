"""Tests for message header decoding."""

import pytest

from loadbench.domain.models import MessageHeader
from loadbench.exceptions import EncodingError, SchemaError
from loadbench.parser.header import decode_header


def _make_header(**overrides):
    header = {
        "numRequiredSignatures": 2,
        "numReadonlySignedAccounts": 1,
        "numReadonlyUnsignedAccounts": 3,
    }
    header.update(overrides)
    return header


class TestDecodeHeader:
    def test_valid(self):
        assert decode_header(_make_header()) == MessageHeader(
            num_required_signatures=2,
            num_readonly_signed_accounts=1,
            num_readonly_unsigned_accounts=3,
        )

    def test_boundaries(self):
        header = decode_header(_make_header(numRequiredSignatures=255, numReadonlySignedAccounts=0))
        assert header.num_required_signatures == 255
        assert header.num_readonly_signed_accounts == 0

    @pytest.mark.parametrize(
        "field", ["numRequiredSignatures", "numReadonlySignedAccounts", "numReadonlyUnsignedAccounts"]
    )
    def test_missing_field(self, field):
        header = _make_header()
        del header[field]
        with pytest.raises(SchemaError, match=field):
            decode_header(header)

    @pytest.mark.parametrize("value", [-1, 256, 1.5, "1", True])
    def test_not_u8(self, value):
        with pytest.raises(EncodingError, match="numReadonlyUnsignedAccounts"):
            decode_header(_make_header(numReadonlyUnsignedAccounts=value))

    def test_first_failure_wins(self):
        header = _make_header(numRequiredSignatures=999)
        del header["numReadonlySignedAccounts"]
        with pytest.raises(EncodingError, match="numRequiredSignatures"):
            decode_header(header)

    def test_not_an_object(self):
        with pytest.raises(SchemaError):
            decode_header([1, 0, 0])
