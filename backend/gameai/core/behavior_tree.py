"""Behavior tree composites and decorators with an indented execution trace.

Every node is a ``Task``: calling it runs it and returns the task itself, so
the resulting state can be read with ``task(log).state``. When a ``log`` list
is passed each node appends a line on entry (``Selector()``) and on exit
(``L Success``); children are indented with ``"| "``.
"""
import logging
import random
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from .errors import SearchLimitExceeded

logger = logging.getLogger(__name__)

Log = List[str]


class State(str, Enum):
    """Task state enumeration."""
    SUCCESS = "Success"
    FAILURE = "Failure"
    RUNNING = "Running"
    READY = "Ready"

    @classmethod
    def parse(cls, value: Union[str, "State"]) -> "State":
        """Accept either a value ("Success") or a name ("SUCCESS"), any case."""
        if isinstance(value, State):
            return value
        for state in cls:
            if str(value).lower() in (state.value.lower(), state.name.lower()):
                return state
        raise ValueError(f"Unknown state '{value}'. Must be one of: {[s.value for s in cls]}")


class Task:
    """Base node. Used as a leaf it keeps the state it was given."""

    name = "Task"

    def __init__(self, task_id: str = "", state: State = State.READY):
        self.id = task_id or self.name
        self.state = state

    def get_id(self) -> str:
        return self.id

    def get_state(self) -> State:
        return self.state

    def describe(self) -> str:
        return f"{self.name}({self.id})"

    def enter(self, log: Optional[Log], level: str) -> None:
        if log is not None:
            log.append(f"{level}{self.describe()}")

    def leave(self, log: Optional[Log], level: str) -> None:
        if log is not None:
            log.append(f"{level}L {self.state.value}")

    def tick(self, log: Optional[Log], level: str) -> None:
        """Update self.state; leaves keep their state."""

    def __call__(self, log: Optional[Log] = None, level: str = "") -> "Task":
        self.enter(log, level)
        self.tick(log, level)
        self.leave(log, level)
        return self


class Action(Task):
    """Leaf whose state comes from a callable returning a State or a bool."""

    name = "Action"

    def __init__(self, task_id: str, func: Callable[[], Union[State, bool]]):
        super().__init__(task_id)
        self.func = func

    def tick(self, log: Optional[Log], level: str) -> None:
        result = self.func()
        if isinstance(result, State):
            self.state = result
        else:
            self.state = State.SUCCESS if result else State.FAILURE


class CheckState(Task):
    """Succeeds when another task is currently in the given state."""

    name = "CheckState"

    def __init__(self, check_task: Task, check_state: State = State.SUCCESS):
        super().__init__()
        self.check_task = check_task
        self.check_state = check_state

    def describe(self) -> str:
        return f"{self.name}({self.check_task.get_id()},{self.check_state.value})"

    def tick(self, log: Optional[Log], level: str) -> None:
        matched = self.check_task.get_state() == self.check_state
        self.state = State.SUCCESS if matched else State.FAILURE


class Composite(Task):
    """Task with an ordered list of children."""

    def __init__(self, *tasks: Task):
        super().__init__()
        self.tasks: List[Task] = list(tasks)

    def describe(self) -> str:
        return f"{self.name}()"


class Selector(Composite):
    """Returns as soon as one child does not fail."""

    name = "Selector"

    def tick(self, log: Optional[Log], level: str) -> None:
        self.state = State.FAILURE
        for task in self.tasks:
            self.state = task(log, level + "| ").get_state()
            if self.state != State.FAILURE:
                break


class Sequence(Composite):
    """Returns as soon as one child does not succeed."""

    name = "Sequence"

    def tick(self, log: Optional[Log], level: str) -> None:
        self.state = State.SUCCESS
        for task in self.tasks:
            self.state = task(log, level + "| ").get_state()
            if self.state != State.SUCCESS:
                break


class RandomSelector(Composite):
    """Runs a single child chosen at random."""

    name = "RandomSelector"

    def __init__(self, *tasks: Task, rng: Optional[random.Random] = None):
        super().__init__(*tasks)
        self._rng = rng or random.Random()

    def tick(self, log: Optional[Log], level: str) -> None:
        self.state = State.FAILURE
        if self.tasks:
            task = self._rng.choice(self.tasks)
            self.state = task(log, level + "| ").get_state()


class Decorator(Task):
    """Task wrapping exactly one child."""

    def __init__(self, task: Optional[Task] = None):
        super().__init__()
        self.task = task

    def describe(self) -> str:
        return f"{self.name}()"


class Inverter(Decorator):
    """Success becomes failure, anything else becomes success."""

    name = "Inverter"

    def tick(self, log: Optional[Log], level: str) -> None:
        self.task(log, level + "| ")
        self.state = State.FAILURE if self.task.get_state() == State.SUCCESS else State.SUCCESS


class Succeeder(Decorator):
    """Runs the child and always succeeds."""

    name = "Succeeder"

    def tick(self, log: Optional[Log], level: str) -> None:
        self.state = State.SUCCESS
        self.task(log, level + "| ")


class Repeater(Decorator):
    """Runs the child a set number of times; the count is used up across calls."""

    name = "Repeater"

    def __init__(self, task: Optional[Task] = None, counter: int = 0):
        super().__init__(task)
        self.counter = counter

    def describe(self) -> str:
        return f"{self.name}({self.counter})"

    def tick(self, log: Optional[Log], level: str) -> None:
        self.state = State.SUCCESS
        while self.task is not None and self.counter > 0:
            self.counter -= 1
            self.task(log, level + "| ")


class RepeatUntilFail(Decorator):
    """Runs the child until it stops succeeding, then succeeds."""

    name = "Repeat_until_fail"

    def __init__(self, task: Optional[Task] = None, max_iterations: Optional[int] = None):
        super().__init__(task)
        self.max_iterations = max_iterations

    def tick(self, log: Optional[Log], level: str) -> None:
        self.state = State.SUCCESS
        runs = 0
        while self.task is not None and self.task(log, level + "| ").get_state() == State.SUCCESS:
            runs += 1
            if self.max_iterations is not None and runs >= self.max_iterations:
                raise SearchLimitExceeded(self.name, self.max_iterations)


COMPOSITES = {
    "selector": Selector,
    "sequence": Sequence,
    "random_selector": RandomSelector,
}

DECORATORS = {
    "inverter": Inverter,
    "succeeder": Succeeder,
    "repeater": Repeater,
    "repeat_until_fail": RepeatUntilFail,
}


def _check_node(spec: Any) -> None:
    if not isinstance(spec, dict):
        raise ValueError(f"Tree node must be an object, got {type(spec).__name__}")
    if not isinstance(spec.get("type"), str):
        raise ValueError("Tree node requires a string 'type'")


def _children(spec: Dict[str, Any]) -> List[Dict[str, Any]]:
    children = spec.get("children", [])
    if not isinstance(children, list):
        raise ValueError(f"'{spec['type']}' node 'children' must be an array")
    return children


def _collect_leaves(spec: Any, leaves: Dict[str, Task]) -> None:
    _check_node(spec)
    if spec["type"] == "task":
        task_id = spec.get("id")
        if not task_id or not isinstance(task_id, str):
            raise ValueError("Task node requires a string 'id'")
        leaves[task_id] = Task(task_id, State.parse(spec.get("state", State.SUCCESS)))
    for child in _children(spec):
        _collect_leaves(child, leaves)
    if "child" in spec:
        _collect_leaves(spec["child"], leaves)


def build_tree(
    spec: Dict[str, Any],
    rng: Optional[random.Random] = None,
    max_iterations: Optional[int] = None,
) -> Task:
    """
    Build a behavior tree from a nested dict.

    Node forms:
        {"type": "task", "id": "open_door", "state": "Success"}
        {"type": "check_state", "task": "open_door", "state": "Failure"}
        {"type": "sequence" | "selector" | "random_selector", "children": [...]}
        {"type": "inverter" | "succeeder" | "repeat_until_fail", "child": {...}}
        {"type": "repeater", "count": 3, "child": {...}}

    Args:
        spec: Root node description.
        rng: Random source for random selectors.
        max_iterations: Guard for repeat_until_fail nodes and the largest
            total repeater count along any path of nested repeaters.

    Returns:
        Root task.
    """
    leaves: Dict[str, Task] = {}
    _collect_leaves(spec, leaves)
    return _build(spec, leaves, rng, max_iterations)


def _build(spec, leaves, rng, max_iterations) -> Task:
    node_type = spec.get("type")
    if node_type == "task":
        return leaves[spec["id"]]

    if node_type == "check_state":
        ref = spec.get("task")
        if not isinstance(ref, str) or ref not in leaves:
            raise ValueError(f"check_state refers to unknown task '{ref}'")
        return CheckState(leaves[ref], State.parse(spec.get("state", State.SUCCESS)))

    if node_type in COMPOSITES:
        children = [_build(child, leaves, rng, max_iterations) for child in _children(spec)]
        if node_type == "random_selector":
            return RandomSelector(*children, rng=rng)
        return COMPOSITES[node_type](*children)

    if node_type in DECORATORS:
        if "child" not in spec:
            raise ValueError(f"'{node_type}' node requires a 'child'")
        if node_type == "repeater":
            count = _repeat_count(spec, max_iterations)
            # Nested repeaters share one budget
            budget = max_iterations // max(count, 1) if max_iterations is not None else None
            return Repeater(_build(spec["child"], leaves, rng, budget), count)
        child = _build(spec["child"], leaves, rng, max_iterations)
        if node_type == "repeat_until_fail":
            return RepeatUntilFail(child, max_iterations)
        return DECORATORS[node_type](child)

    valid = ["task", "check_state"] + list(COMPOSITES) + list(DECORATORS)
    raise ValueError(f"Unknown node type '{node_type}'. Must be one of: {valid}")


def _repeat_count(spec: Dict[str, Any], max_iterations: Optional[int]) -> int:
    count = spec.get("count", 0)
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError("'repeater' node 'count' must be an integer")
    if max_iterations is not None and count > max_iterations:
        raise ValueError(f"'repeater' count {count} exceeds the limit of {max_iterations}")
    return count
