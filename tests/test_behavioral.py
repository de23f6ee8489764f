from __future__ import annotations

import pytest

from pattern_catalog import HistoryIndexError, run
from pattern_catalog.behavioral.chain import FirstHandler, SecondHandler
from pattern_catalog.behavioral.command import (
    Clipboard,
    CopyCommand,
    CutCommand,
    PasteCommand,
    TextEditor,
    TextEditorInvoker,
)
from pattern_catalog.behavioral.iterator import (
    Product,
    ProductArrayCollection,
    ProductListCollection,
    _CursorIterator,
)
from pattern_catalog.behavioral.memento import History, TextEditorMemento
from pattern_catalog.behavioral.observer import Newspaper, Subscriber
from pattern_catalog.behavioral.state import VendingMachine, VendingState
from pattern_catalog.behavioral.strategy import CarBookingStrategy, Customer, TrainBookingStrategy
from pattern_catalog.behavioral.visitor import Operation, ShapeKind, ShapeVisitor, circle, square, visit_all


def _lines(name: str) -> list[str]:
    return [event.text for event in run(name)]


def test_chain_handles_known_requests(capsys: pytest.CaptureFixture[str]) -> None:
    chain = FirstHandler(SecondHandler(None))
    assert chain.handle("Request1") is True
    assert chain.handle("Request2") is True
    assert capsys.readouterr().out.splitlines() == [
        "FirstHandler handled Request1",
        "SecondHandler handled Request2",
    ]


def test_chain_end_returns_false_without_output(capsys: pytest.CaptureFixture[str]) -> None:
    chain = FirstHandler(SecondHandler(None))
    assert chain.handle("Request3") is False
    assert capsys.readouterr().out == ""


def test_command_cut_copy_paste_and_undo() -> None:
    clipboard = Clipboard()
    editor = TextEditor("Baeldung")
    invoker = TextEditorInvoker()

    invoker.execute_command(CutCommand(editor, clipboard))
    assert editor.content == "Baeldun" and clipboard.content == "g"
    invoker.execute_command(CopyCommand(editor, clipboard))
    invoker.execute_command(PasteCommand(editor, clipboard))
    assert editor.content == "BaeldunBaeldun"

    invoker.undo()
    assert editor.content == "Baeldun"
    assert len(invoker) == 2


def test_command_undo_on_empty_history_is_noop() -> None:
    editor = TextEditor("text")
    invoker = TextEditorInvoker()
    invoker.undo()
    assert editor.content == "text"


def test_command_scenario_transcript() -> None:
    assert _lines("command") == ["BaeldunBaeldun", "Baeldun"]


def test_iterators_walk_in_insertion_order() -> None:
    products = [Product(i, f"Product {i}") for i in range(1, 4)]
    for collection in (ProductListCollection(), ProductArrayCollection()):
        for product in products:
            collection.add(product)
        iterator = collection.create_iterator()
        walked = []
        while iterator.has_next():
            walked.append(iterator.next())
        assert walked == products
        assert list(collection) == products


def test_array_collection_ignores_overflow() -> None:
    collection = ProductArrayCollection()
    for i in range(12):
        collection.add(Product(i, f"Product {i}"))
    assert len(collection) == ProductArrayCollection.CAPACITY
    assert [p.id for p in collection] == list(range(10))


def test_cursor_rejects_empty_slot() -> None:
    cursor = _CursorIterator([None], lambda: 1)
    assert cursor.has_next()
    with pytest.raises(RuntimeError):
        cursor.next()


def test_iterator_scenario_prints_products() -> None:
    assert _lines("iterator") == [
        "Product(id=1, name='Product 1')",
        "Product(id=2, name='Product 2')",
        "Product(id=3, name='Product 3')",
    ]


def test_mediator_skips_sender() -> None:
    lines = _lines("mediator")
    assert lines[:3] == [
        "User 1 sending message: Hello, everyone!",
        "User 2 received message: Hello, everyone!",
        "User 3 received message: Hello, everyone!",
    ]
    assert "User 2 received message: Hi, User 1!" not in lines
    assert len(lines) == 6


def test_memento_restore_and_out_of_range() -> None:
    history = History()
    editor = TextEditorMemento("Initial text")
    history.save_memento(editor.create_memento())
    editor.text = "Edited text"
    history.save_memento(editor.create_memento())

    editor.restore(history.get_memento(0))
    assert editor.text == "Initial text"

    with pytest.raises(HistoryIndexError):
        history.get_memento(2)
    with pytest.raises(IndexError):
        history.get_memento(-1)


def test_observer_removed_subscriber_misses_edition(capsys: pytest.CaptureFixture[str]) -> None:
    newspaper = Newspaper()
    subscribers = [Subscriber(newspaper, f"Subscriber {i}") for i in (1, 2, 3)]
    newspaper.remove_observer(subscribers[1])
    capsys.readouterr()

    newspaper.set_latest_edition("New Edition 3")
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Subscriber 1: Received the latest edition of the newspaper - 'New Edition 3'",
        "Subscriber 3: Received the latest edition of the newspaper - 'New Edition 3'",
    ]
    assert len(newspaper.observers) == 2


def test_vending_machine_rejects_select_before_money(capsys: pytest.CaptureFixture[str]) -> None:
    machine = VendingMachine()
    machine.select_item("A01")
    assert machine.state_name is VendingState.IDLE
    assert "insert money first" in capsys.readouterr().out


def test_vending_machine_legal_cycle() -> None:
    machine = VendingMachine()
    seen = [machine.state_name]
    machine.insert_money(5)
    seen.append(machine.state_name)
    machine.select_item("A01")
    seen.append(machine.state_name)
    machine.dispense_item()
    seen.append(machine.state_name)
    assert seen == [
        VendingState.IDLE,
        VendingState.ACCEPTING_MONEY,
        VendingState.DISPENSING,
        VendingState.IDLE,
    ]


def test_vending_machine_self_transitions(capsys: pytest.CaptureFixture[str]) -> None:
    machine = VendingMachine()
    machine.insert_money(5)
    machine.insert_money(3)
    machine.dispense_item()
    assert machine.state_name is VendingState.ACCEPTING_MONEY
    machine.select_item("B02")
    machine.insert_money(1)
    machine.select_item("B02")
    assert machine.state_name is VendingState.DISPENSING
    assert capsys.readouterr().out.splitlines()[-2:] == [
        "Please wait, dispensing item...",
        "Please wait, dispensing item...",
    ]


def test_strategy_switches_fare(capsys: pytest.CaptureFixture[str]) -> None:
    customer = Customer(CarBookingStrategy())
    assert customer.calculate_fare(5) == 62.5
    customer.booking_strategy = TrainBookingStrategy()
    assert customer.calculate_fare(2) == 17.0
    assert capsys.readouterr().out.splitlines() == [
        "Calculating fares using CarBookingStrategy",
        "Calculating fares using TrainBookingStrategy",
    ]


def test_template_method_keeps_step_order() -> None:
    lines = _lines("template_method")
    assert lines[0] == "Playing Cricket:"
    assert lines[4] == ""
    assert lines[5] == "Playing Football:"
    assert lines[-1] == "Football Game Finished!"


def test_visitor_dispatch_by_kind(capsys: pytest.CaptureFixture[str]) -> None:
    visit_all([circle(), square()], ShapeVisitor(Operation.DESCRIBE))
    assert capsys.readouterr().out.splitlines() == [
        "Circle: round, no corners",
        "Square: four equal sides",
    ]
    assert _lines("visitor") == ["Drawing Circle", "Drawing Square"]


def test_visitor_missing_pair_raises() -> None:
    visitor = ShapeVisitor(Operation.DRAW, table={})
    with pytest.raises(LookupError):
        circle().accept(visitor)
    assert circle().kind is ShapeKind.CIRCLE
