import pytest

from dslab.queues.handler import EPS, Handler, RequestType


def test_initial_state():
    handler = Handler()
    assert handler.type1_processed == 0
    assert handler.type2_processed == 0
    assert handler.time_standby == 0.0
    assert handler.in_process is RequestType.NONE
    assert handler.time_finish == 0.0


def test_add_type_one():
    handler = Handler()
    handler.add(RequestType.ONE, 2.0, 1.5)
    assert handler.type1_processed == 1
    assert handler.type2_processed == 0
    assert handler.in_process is RequestType.ONE
    assert handler.time_finish == pytest.approx(3.5)


def test_add_type_two():
    handler = Handler()
    handler.add(RequestType.TWO, 1.0, 0.5)
    assert handler.type2_processed == 1
    assert handler.type1_processed == 0
    assert handler.in_process is RequestType.TWO


def test_zero_process_time_leaves_handler_idle():
    handler = Handler()
    handler.add(RequestType.ONE, 4.0, 0.0)
    assert handler.type1_processed == 1
    assert handler.in_process is RequestType.NONE
    assert handler.time_finish == pytest.approx(4.0)


def test_process_time_below_eps_is_idle():
    handler = Handler()
    handler.add(RequestType.TWO, 1.0, EPS / 2)
    assert handler.in_process is RequestType.NONE


def test_counts_accumulate():
    handler = Handler()
    for _ in range(3):
        handler.add(RequestType.ONE, 0.0, 1.0)
    handler.add(RequestType.TWO, 0.0, 1.0)
    assert (handler.type1_processed, handler.type2_processed) == (3, 1)