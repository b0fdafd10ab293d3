import numpy as np
import pytest

from gulfdatum.errors import OutOfDomainError
from gulfdatum.utils.logging import reset_warnings
from gulfdatum.utils.functions import check_domain, check_latitude


@pytest.fixture(autouse=True)
def forget_warnings():
    reset_warnings()


def test_check_domain(caplog):
    check_domain(False, 'nothing wrong')
    assert caplog.text == ''

    check_domain(np.array([False, True]), 'something wrong')
    assert 'something wrong (this warning will not repeat)' in caplog.text

    with pytest.raises(OutOfDomainError):
        check_domain(True, 'something wrong', strict=True)

    # OutOfDomainError is still a ValueError
    with pytest.raises(ValueError):
        check_domain(True, 'something wrong', strict=True)


def test_check_latitude(caplog):
    check_latitude(90.)
    check_latitude(-90.)
    check_latitude(np.array([0., 45., -89.9]))
    check_latitude(float('nan'), strict=True)
    assert caplog.text == ''

    check_latitude(90.1)
    assert 'Latitude outside [-90, 90]' in caplog.text

    with pytest.raises(OutOfDomainError):
        check_latitude(np.array([0., -91.]), strict=True)
