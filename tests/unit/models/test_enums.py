"""
Unit tests for model enums.
"""

from src.models.enums import BlockingOperation, OperationType


class TestOperationType:
    def test_values(self):
        assert [op.value for op in OperationType] == ["credit", "debit"]

    def test_is_string_enum(self):
        assert OperationType("debit") is OperationType.debit
        assert OperationType.credit == "credit"


class TestBlockingOperation:
    def test_block_disables(self):
        assert BlockingOperation.block.enabled is False

    def test_unblock_enables(self):
        assert BlockingOperation.unblock.enabled is True
