import pytest

from recseq.errors import ContractViolation
from recseq.frame import Frame, NOT_STARTED, AT_VALUE, NESTING, DONE, is_nested


class Marker:
    def __release__(self):
        return None


def counting(n, log):
    log.append('start')
    for i in range(n):
        yield i
        log.append('resumed')


def test_frame_does_not_run_before_first_resume():
    log = []
    frame = Frame(counting(2, log))
    assert frame.state == NOT_STARTED
    assert log == []


def test_frame_publishes_values():
    frame = Frame(counting(2, []))
    assert frame.resume() is None
    assert frame.state == AT_VALUE
    assert frame.value == 0
    frame.resume()
    assert frame.value == 1


def test_frame_completes():
    frame = Frame(counting(1, []))
    frame.resume()
    frame.resume()
    assert frame.done
    assert frame.state == DONE


def test_value_before_start_is_a_contract_violation():
    frame = Frame(counting(1, []))
    with pytest.raises(ContractViolation):
        frame.value


def test_value_after_completion_is_a_contract_violation():
    frame = Frame(counting(0, []))
    frame.resume()
    with pytest.raises(ContractViolation):
        frame.value


def test_resuming_finished_frame_is_a_contract_violation():
    frame = Frame(counting(0, []))
    frame.resume()
    with pytest.raises(ContractViolation) as e_info:
        frame.resume()
    assert e_info.value.frame is frame


def test_nested_yield_is_reported():
    marker = Marker()

    def producer():
        yield marker

    frame = Frame(producer())
    assert frame.resume() is marker
    assert frame.state == NESTING
    with pytest.raises(ContractViolation):
        frame.value


def test_is_nested():
    assert is_nested(Marker())
    assert not is_nested(42)
    assert not is_nested([1, 2])


def test_failing_producer_finishes_frame():
    def producer():
        yield 1
        raise ValueError('broken')

    frame = Frame(producer())
    frame.resume()
    with pytest.raises(ValueError):
        frame.resume()
    assert frame.done


def test_resume_with_error_raises_inside_producer():
    seen = []

    def producer():
        try:
            yield 1
        except KeyError as e:
            seen.append(e)
        yield 2

    frame = Frame(producer())
    frame.resume()
    error = KeyError('x')
    frame.resume(error)
    assert seen == [error]
    assert frame.value == 2


def test_close_finalizes_without_producing():
    log = []

    def producer():
        try:
            yield 1
            log.append('produced')
            yield 2
        finally:
            log.append('finally')

    frame = Frame(producer())
    frame.resume()
    frame.close()
    assert log == ['finally']
    assert frame.done


def test_close_is_idempotent():
    frame = Frame(counting(3, []))
    frame.resume()
    frame.close()
    frame.close()
    assert frame.done


def test_new_frame_is_its_own_root():
    frame = Frame(counting(1, []))
    assert frame.is_root
    assert frame.root is frame
    assert frame.directory is frame
