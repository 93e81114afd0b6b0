import pytest

from algobox.todo import TASK_LIMIT, TodoList, main


def _feed(monkeypatch, answers):
    stream = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(stream)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_add_and_iterate():
    tasks = TodoList()
    tasks.add("write")
    tasks.add("test")
    assert list(tasks) == ["write", "test"]
    assert len(tasks) == 2


def test_remove_shifts_remaining():
    tasks = TodoList()
    for task in ("a", "b", "c"):
        tasks.add(task)
    assert tasks.remove(2) == "b"
    assert list(tasks) == ["a", "c"]


@pytest.mark.parametrize("number", [0, 2, -1])
def test_remove_invalid_number(number):
    tasks = TodoList()
    tasks.add("only")
    with pytest.raises(IndexError):
        tasks.remove(number)
    assert list(tasks) == ["only"]


def test_full_list():
    tasks = TodoList(capacity=1)
    tasks.add("one")
    with pytest.raises(OverflowError):
        tasks.add("two")


def test_long_task_truncated():
    tasks = TodoList()
    tasks.add("y" * 150)
    assert list(tasks) == ["y" * TASK_LIMIT]


def test_main_add_view_remove(monkeypatch, capsys):
    _feed(monkeypatch, ["1", "Buy milk", "2", "3", "1", "2", "4"])
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "✅ Task added successfully!" in out
    assert "1. Buy milk" in out
    assert "✅ Task removed successfully!" in out
    assert "❌ No tasks found." in out.split("Task removed")[1]
    assert out.rstrip().endswith("👋 Exiting... Have a productive day!")


def test_main_invalid_inputs(monkeypatch, capsys):
    _feed(monkeypatch, ["9", "3", "4"])
    main([])
    out = capsys.readouterr().out
    assert "❌ Invalid choice. Try again." in out
    assert "❌ No tasks to remove." in out