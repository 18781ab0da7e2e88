"""
Split accumulation for banking transactions.

QIF does not bracket split sub-fields. A record simply lists ``S``
(category), ``E`` (memo) and ``$`` (amount) lines, and a reader has to
infer where one split ends and the next begins. The only signal is
collision: a new split starts whenever a field would otherwise overwrite
data already present on the current split.

Transition table (when does a field start a new split?):

  ====  ========  =================================================
  Tag   Field     Starts a new split when
  ====  ========  =================================================
  S     category  always
  E     memo      no split yet, or current has a memo or an amount
  $     amount    no split yet, or current has an amount
  ====  ========  =================================================

Otherwise the value is attached to the current (last) split.

``accumulate_split`` is a pure function: it returns a new tuple and never
mutates its input, so a half-built record can be discarded safely.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from enum import Enum

from qif_ingest.models import Split


class SplitField(Enum):
    """Split sub-fields, keyed by their QIF tag."""

    CATEGORY = "S"
    MEMO = "E"
    AMOUNT = "$"

    @property
    def attribute(self) -> str:
        return self.name.lower()


_STARTS_NEW_SPLIT: dict[SplitField, Callable[[Split], bool]] = {
    SplitField.CATEGORY: lambda current: True,
    SplitField.MEMO: lambda current: (
        current.memo is not None or current.amount is not None
    ),
    SplitField.AMOUNT: lambda current: current.amount is not None,
}


def starts_new_split(splits: tuple[Split, ...], split_field: SplitField) -> bool:
    """Return True if *split_field* must open a new split after *splits*."""
    if not splits:
        return True
    return _STARTS_NEW_SPLIT[split_field](splits[-1])


def accumulate_split(
    splits: tuple[Split, ...],
    split_field: SplitField,
    value: str | int,
) -> tuple[Split, ...]:
    """Fold one split sub-field into the split list.

    Args:
        splits: Splits accumulated so far for the current record.
        split_field: Which sub-field the value belongs to.
        value: Category or memo text, or amount in minor units.

    Returns:
        A new tuple: either *splits* plus a fresh split carrying only
        *value*, or *splits* with the last split updated.
    """
    if starts_new_split(splits, split_field):
        return splits + (Split(**{split_field.attribute: value}),)
    return splits[:-1] + (replace(splits[-1], **{split_field.attribute: value}),)
