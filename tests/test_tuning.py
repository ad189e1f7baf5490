import pytest

from tvhkit.tuning import Channel, ChannelNumber, ChannelTuningPredictor


@pytest.fixture
def predictor():
    p = ChannelTuningPredictor()
    for n in (3, 1, 5, 2, 4):
        p.add_channel(Channel(id=100 + n, number=n))
    return p


def test_channel_number_ordering():
    assert ChannelNumber(5, 1) < ChannelNumber(6, 0)
    assert ChannelNumber(5, 0) < ChannelNumber(5, 1)
    assert ChannelNumber(5, 1) == ChannelNumber(5, 1)


def test_tuning_up(predictor):
    assert predictor.predict_next_channel_id(102, 103) == 104


def test_tuning_down(predictor):
    assert predictor.predict_next_channel_id(104, 103) == 102


def test_unknown_origin_predicts_up(predictor):
    assert predictor.predict_next_channel_id(999, 102) == 103


def test_jump_predicts_nothing(predictor):
    assert predictor.predict_next_channel_id(101, 104) is None


def test_tuning_up_at_last_channel(predictor):
    assert predictor.predict_next_channel_id(104, 105) is None


def test_tuning_first_channel_predicts_second(predictor):
    assert predictor.predict_next_channel_id(105, 101) == 102


def test_unknown_target_predicts_nothing(predictor):
    assert predictor.predict_next_channel_id(101, 999) is None


def test_empty_predictor():
    assert ChannelTuningPredictor().predict_next_channel_id(1, 2) is None


def test_remove_channel(predictor):
    predictor.remove_channel(104)
    assert predictor.predict_next_channel_id(102, 103) == 105


def test_remove_unknown_channel_is_noop(predictor):
    predictor.remove_channel(999)
    assert predictor.predict_next_channel_id(102, 103) == 104


def test_update_channel_moves_number(predictor):
    predictor.update_channel(Channel(104, 4), Channel(104, 10))
    assert predictor.predict_next_channel_id(102, 103) == 105
    assert predictor.predict_next_channel_id(103, 105) == 104


def test_minor_numbers_sort_between_majors():
    p = ChannelTuningPredictor()
    p.add_channel(Channel(1, 5))
    p.add_channel(Channel(3, 6))
    p.add_channel(Channel(2, 5, 1))
    assert p.predict_next_channel_id(999, 1) == 2
    assert p.predict_next_channel_id(1, 2) == 3
    assert p.predict_next_channel_id(3, 2) == 1