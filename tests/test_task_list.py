from core import Task
from application.task_list import count_by_status, index_of, numeric_id, order, status_rank


def _tasks(pairs):
    return [Task(id=task_id, status=status) for task_id, status in pairs]


def test_order_groups_by_status_then_newest_id():
    tasks = _tasks([("100", "pending"), ("300", "todo"), ("200", "done"), ("50", "todo")])
    assert [t.id for t in order(tasks)] == ["300", "50", "200", "100"]


def test_order_compares_ids_numerically():
    tasks = _tasks([("9", "todo"), ("10", "todo"), ("1000", "todo")])
    assert [t.id for t in order(tasks)] == ["1000", "10", "9"]


def test_order_treats_unknown_status_as_todo():
    tasks = _tasks([("1", "done"), ("2", "someday"), ("3", "")])
    assert [t.id for t in order(tasks)] == ["3", "2", "1"]


def test_order_is_deterministic_on_numeric_ties():
    a = _tasks([("007", "todo"), ("7", "todo"), ("abc", "todo")])
    b = list(reversed(a))
    assert [t.id for t in order(a)] == [t.id for t in order(b)] == ["7", "007", "abc"]


def test_status_rank():
    assert status_rank("todo") == 0
    assert status_rank("Done") == 1
    assert status_rank("pending") == 2
    assert status_rank("???") == 0


def test_numeric_id_uses_leading_integer():
    assert numeric_id("1700000000") == 1700000000
    assert numeric_id("12abc") == 12
    assert numeric_id("abc") == 0
    assert numeric_id("") == 0


def test_count_by_status():
    tasks = _tasks([("1", "todo"), ("2", "done"), ("3", "DONE"), ("4", "x")])
    assert count_by_status(tasks) == {"todo": 2, "done": 2, "pending": 0}


def test_index_of():
    tasks = _tasks([("1", "todo"), ("2", "done")])
    assert index_of(tasks, "2") == 1
    assert index_of(tasks, "3") is None
