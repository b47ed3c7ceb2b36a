"""
Hypothesis-based fuzzing.

Property-based tests that generate adversarial inputs and check that the
invariants hold.

Boundaries fuzzed here:
- Tokenizer: arbitrary text, quotes anywhere
- Field parsers: quantities and money across their whole valid range
- Session stack: random login/logout sequences
- Ledger: income/expenditure totals against a straight sum
- Command loop: arbitrary lines never escape as non-bookstore exceptions
"""

import re
from decimal import Decimal
from typing import Sequence

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from bookstore_kernel.db.types import MAX_STOCK, round_money
from bookstore_kernel.domain import validation
from bookstore_kernel.domain.records import Account, Privilege, RecordKind
from bookstore_kernel.domain.session import SessionStack
from bookstore_kernel.domain.tokenizer import split_command_line
from bookstore_kernel.exceptions import BookstoreError
from bookstore_kernel.kernel import BookstoreKernel
from bookstore_kernel.selectors import LedgerSelector
from bookstore_kernel.services import Ledger
from bookstore_kernel.storage import Record, RecordStorage

FUZZ_SETTINGS = settings(
    max_examples=150,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)


class MemoryStorage(RecordStorage):
    """Keeps each record set in a dict so fuzzed kernels never touch disk."""

    def __init__(self) -> None:
        self.sets: dict[RecordKind, list[Record]] = {}

    def load_all(self, kind: RecordKind) -> list[Record]:
        return list(self.sets.get(kind, []))

    def persist_all(self, kind: RecordKind, records: Sequence[Record]) -> None:
        self.sets[kind] = list(records)


# =============================================================================
# Tokenizer
# =============================================================================


@FUZZ_SETTINGS
@given(st.text())
def test_tokens_are_never_empty_and_never_contain_quotes(line):
    tokens = split_command_line(line)
    assert all(tokens)
    assert all('"' not in token for token in tokens)


@FUZZ_SETTINGS
@given(st.text(alphabet=st.characters(exclude_characters='"')))
def test_unquoted_text_splits_on_ascii_whitespace(line):
    expected = [token for token in re.split(r"[ \t\n\r\v\f]+", line) if token]
    assert split_command_line(line) == expected


# =============================================================================
# Field parsers
# =============================================================================


@FUZZ_SETTINGS
@given(st.integers(min_value=0, max_value=MAX_STOCK))
def test_every_stock_value_parses(n):
    assert validation.parse_quantity(str(n)) == n


@FUZZ_SETTINGS
@given(st.integers(min_value=MAX_STOCK + 1, max_value=9_999_999_999))
def test_quantities_above_range_rejected(n):
    assert validation.parse_quantity(str(n)) is None


@FUZZ_SETTINGS
@given(st.decimals(min_value=0, max_value=Decimal("9999999999.99"), places=2))
def test_two_place_amounts_parse_exactly(amount):
    text = f"{amount:.2f}"
    assert validation.parse_money(text) == amount


# =============================================================================
# Session stack
# =============================================================================

ACCOUNTS = [
    Account("owner", "pw", int(Privilege.OWNER), "o"),
    Account("clerk", "pw", int(Privilege.CLERK), "c"),
    Account("cust", "pw", int(Privilege.CUSTOMER), "u"),
]


@FUZZ_SETTINGS
@given(st.lists(st.one_of(st.sampled_from(ACCOUNTS), st.none()), max_size=40))
def test_privilege_always_tracks_top_frame(operations):
    stack = SessionStack()
    model: list[Account] = []
    for op in operations:
        if op is None:
            if model:
                stack.logout()
                model.pop()
            else:
                try:
                    stack.logout()
                except BookstoreError:
                    pass
        else:
            stack.login(op, op.password)
            model.append(op)
        assert len(stack) == len(model)
        expected = model[-1].privilege if model else Privilege.GUEST
        assert stack.privilege == expected


# =============================================================================
# Ledger
# =============================================================================


@FUZZ_SETTINGS
@given(
    st.lists(
        st.tuples(
            st.booleans(),
            st.decimals(min_value=Decimal("0.01"), max_value=Decimal("100000"), places=2),
        ),
        max_size=30,
    ),
    st.data(),
)
def test_summary_matches_straight_sum(moves, data):
    ledger = Ledger(MemoryStorage())
    for is_income, amount in moves:
        if is_income:
            ledger.record_income(amount)
        else:
            ledger.record_expenditure(amount)

    k = data.draw(st.integers(min_value=0, max_value=len(moves)))
    tail = moves[len(moves) - k:]
    summary = LedgerSelector(ledger).summarize(k)
    assert summary.income == sum((round_money(a) for inc, a in tail if inc), Decimal("0"))
    assert summary.expenditure == sum((round_money(a) for inc, a in tail if not inc), Decimal("0"))


# =============================================================================
# Command loop
# =============================================================================

COMMAND_WORDS = [
    "su", "logout", "register", "passwd", "useradd", "delete", "show", "buy",
    "select", "modify", "import", "log", "report", "finance",
]
ARGUMENTS = st.one_of(
    st.sampled_from(["root", "sjtu", "001", "0", "1", "3", "7", "9.99", "-ISBN=002", "-name=x", "-price=1", "-keyword=a|b"]),
    st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126), max_size=12),
)


@FUZZ_SETTINGS
@given(
    st.lists(
        st.tuples(st.sampled_from(COMMAND_WORDS), st.lists(ARGUMENTS, max_size=4)),
        max_size=25,
    )
)
def test_command_loop_only_ever_prints_results(lines):
    storage = MemoryStorage()
    kernel = BookstoreKernel(storage)
    for word, args in lines:
        result = kernel.execute_line(" ".join([word, *args]))
        assert result is not None
        assert not result.terminate
        for text in result.lines:
            assert "\n" not in text
        assert all(book.stock >= 0 for book in kernel.books.all_books())
        assert storage.load_all(RecordKind.BOOKS) == kernel.books.all_books()
