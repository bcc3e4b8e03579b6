from graphquest.cursorlist import CursorList, Queue, Stack


def _walk(lst):
    out = []
    item = lst.first()
    while item is not None:
        out.append(item)
        item = lst.next()
    return out


def test_first_next_walk_matches_iteration():
    lst = CursorList(["a", "b", "c"])
    assert _walk(lst) == list(lst) == ["a", "b", "c"]


def test_empty_first_is_none():
    lst = CursorList()
    assert lst.first() is None
    assert lst.next() is None
    assert lst.is_empty()


def test_next_at_end_stays_at_end():
    lst = CursorList([1, 2])
    lst.first()
    assert lst.next() == 2
    assert lst.next() is None
    assert lst.next() is None
    assert lst.pop_current() == 2


def test_push_front_and_back():
    lst = CursorList()
    lst.push_back(2)
    lst.push_front(1)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_front_keeps_cursor_on_same_element():
    lst = CursorList(["x", "y"])
    lst.first()
    lst.push_front("w")
    assert lst.next() == "y"


def test_push_current_inserts_after_cursor():
    lst = CursorList([1, 3])
    lst.first()
    lst.push_current(2)
    assert list(lst) == [1, 2, 3]


def test_push_current_without_cursor_does_nothing():
    lst = CursorList([1])
    lst.push_current(2)
    assert list(lst) == [1]


def test_sorted_insert_keeps_order():
    lst = CursorList()
    for value in [5, 1, 4, 2, 3, 3]:
        lst.sorted_insert(value, lambda a, b: a < b)
    assert list(lst) == sorted([5, 1, 4, 2, 3, 3])


def test_sorted_insert_equal_goes_after_existing():
    lst = CursorList()
    lst.sorted_insert(("k", "first"), lambda a, b: a[0] < b[0])
    lst.sorted_insert(("k", "second"), lambda a, b: a[0] < b[0])
    assert [tag for _, tag in lst] == ["first", "second"]


def test_pop_front_and_back():
    lst = CursorList([1, 2, 3])
    assert lst.pop_front() == 1
    assert lst.pop_back() == 3
    assert list(lst) == [2]
    assert lst.pop_back() == 2
    assert lst.pop_back() is None
    assert lst.pop_front() is None


def test_pop_current_moves_to_successor():
    lst = CursorList(["a", "b", "c"])
    lst.first()
    lst.next()
    assert lst.pop_current() == "b"
    assert list(lst) == ["a", "c"]
    assert lst.pop_current() == "c"
    assert lst.pop_current() is None
    assert list(lst) == ["a"]


def test_pop_current_without_cursor():
    assert CursorList([1]).pop_current() is None


def test_clean_empties():
    lst = CursorList([1, 2])
    lst.first()
    lst.clean()
    assert len(lst) == 0
    assert lst.next() is None


def test_queue_is_fifo():
    queue = Queue()
    for item in ["a", "b", "c"]:
        queue.insert(item)
    assert queue.front() == "a"
    assert [queue.remove() for _ in range(3)] == ["a", "b", "c"]
    assert queue.remove() is None
    assert queue.front() is None


def test_queue_clean():
    queue = Queue()
    queue.insert(1)
    queue.clean()
    assert len(queue) == 0


def test_stack_is_lifo():
    stack = Stack()
    for item in ["a", "b", "c"]:
        stack.push(item)
    assert stack.top() == "c"
    assert [stack.pop() for _ in range(3)] == ["c", "b", "a"]
    assert stack.pop() is None
    assert stack.top() is None


def test_stack_clean():
    stack = Stack()
    stack.push(1)
    stack.push(2)
    stack.clean()
    assert len(stack) == 0