import pytest

from taskstack.errors import StackUnderflowError
from taskstack.scheduler import Scheduler
from taskstack.tasks.add import Add
from taskstack.tasks.exp import Exp
from taskstack.tasks.fib import Fib
from taskstack.tasks.mul import Mul


def run(task, scheduler=None):
    scheduler = scheduler if scheduler is not None else Scheduler()
    scheduler.push_task(task)
    scheduler.execute_all()
    return scheduler.pop_data()


def test_fib_base_cases_on_one_scheduler():
    scheduler = Scheduler()
    assert run(Fib(0), scheduler) == 0
    assert run(Fib(1), scheduler) == 1


def test_fib_base_cases():
    assert run(Fib(0)) == 0
    assert run(Fib(1)) == 1


def test_fib_small_n():
    assert run(Fib(5)) == 5


@pytest.mark.parametrize(
    "n, expected", list(enumerate([0, 1, 1, 2, 3, 5, 8, 13, 21, 34]))
)
def test_fib_small_sequence(n, expected):
    assert run(Fib(n)) == expected


@pytest.mark.parametrize("n, expected", [(10, 55), (15, 610), (20, 6765)])
def test_fib_medium_values(n, expected):
    assert run(Fib(n)) == expected


@pytest.mark.parametrize("n", [5, 8, 10])
def test_fib_recursive_properties(n):
    assert run(Fib(n)) == run(Fib(n - 1)) + run(Fib(n - 2))


def test_fib_multiple_calculations():
    scheduler = Scheduler()
    scheduler.push_task(Fib(5))
    scheduler.push_task(Fib(7))
    scheduler.push_task(Fib(10))

    scheduler.execute_all()

    assert scheduler.pop_data() == 5
    assert scheduler.pop_data() == 13
    assert scheduler.pop_data() == 55


def test_fib_empty_stack_error():
    scheduler = Scheduler()
    with pytest.raises(StackUnderflowError):
        scheduler.pop_data()


def test_task_composition():
    scheduler = Scheduler()
    nine = run(Exp(3, 2), scheduler)
    assert nine == 9
    assert run(Add(nine, 5), scheduler) == 14


def test_complex_calculation():
    scheduler = Scheduler()
    exp_result = run(Exp(2, 3), scheduler)
    assert exp_result == 8
    fib_result = run(Fib(5), scheduler)
    assert fib_result == 5
    add_result = run(Add(fib_result, 1), scheduler)
    assert add_result == 6
    assert run(Mul(exp_result, add_result), scheduler) == 48


def test_scheduler_multiple_tasks():
    scheduler = Scheduler()
    assert run(Add(1, 2), scheduler) == 3
    assert run(Mul(3, 4), scheduler) == 12
    assert run(Exp(2, 2), scheduler) == 4
    assert run(Fib(3), scheduler) == 2
    assert scheduler.is_empty()
    assert scheduler.is_empty_data()