from pytest import raises

from dfarun.languages import a_before_b, divisible_by


def test_a_before_b():
    lang = a_before_b()
    assert lang.states == {0, 1, 2}
    assert lang.alphabet == {'a', 'b'}
    assert lang.start == 0
    assert lang.accepting == {0, 1}
    assert lang.is_total


def test_divisible_by():
    div3 = divisible_by(3)
    for value in range(64):
        assert div3.run(format(value, 'b')) == (value % 3 == 0)
    assert div3.run('')

    div7 = divisible_by(7, base=10)
    for value in range(200):
        assert div7.run(str(value)) == (value % 7 == 0)

    assert divisible_by(1).run('101')


def test_divisible_by_invalid():
    with raises(ValueError):
        divisible_by(0)
    with raises(ValueError):
        divisible_by(3, base=1)
    with raises(ValueError):
        divisible_by(3, base=11)
