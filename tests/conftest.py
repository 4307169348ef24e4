import pytest

from item_support import ItemSupportList


@pytest.fixture
def call_transactions():
    return [
        ItemSupportList.transaction(["m1", "m2", "m3"], name="T1"),
        ItemSupportList.transaction(["m1", "m2"], name="T2"),
        ItemSupportList.transaction(["m1", "m3"], name="T3"),
    ]


@pytest.fixture
def textbook_transactions():
    rows = [
        ["I1", "I2", "I5"],
        ["I2", "I4"],
        ["I2", "I3"],
        ["I1", "I2", "I4"],
        ["I1", "I3"],
        ["I2", "I3"],
        ["I1", "I3"],
        ["I1", "I2", "I3", "I5"],
        ["I1", "I2", "I3"],
    ]
    return [
        ItemSupportList.transaction(items, name=f"T{i}00")
        for i, items in enumerate(rows, start=1)
    ]
