
import re

from geodistance.utils.logging import warn_once


def test_warn_once(caplog):
    assert warn_once('test')
    assert 'test' in caplog.text

    assert not warn_once('test')
    assert len(re.findall('test', caplog.text)) == 1


def test_warn_once_formatting(caplog):
    assert warn_once('point %s of %d', 'a', 2)
    assert 'point a of 2' in caplog.text

    assert not warn_once('point %s of %d', 'a', 2)
    assert warn_once('point %s of %d', 'b', 2)
    assert len(re.findall('point', caplog.text)) == 2
