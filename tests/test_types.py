from connectfour.game.types import Outcome, Player


def test_player_other():
    assert Player.RED.other is Player.YELLOW
    assert Player.YELLOW.other is Player.RED


def test_player_str_and_symbol():
    assert str(Player.RED) == "Red"
    assert str(Player.YELLOW) == "Yellow"
    assert Player.RED.symbol == "R"
    assert Player.YELLOW.symbol == "Y"


def test_player_values_are_owner_ids():
    assert Player.RED == 1
    assert Player.YELLOW == 2


def test_outcome_values():
    assert Outcome.ONGOING == 0
    assert Outcome.RED_WINS == 1
    assert Outcome.YELLOW_WINS == 2
    assert Outcome.DRAW == 3


def test_outcome_winner():
    assert Outcome.RED_WINS.winner is Player.RED
    assert Outcome.YELLOW_WINS.winner is Player.YELLOW
    assert Outcome.DRAW.winner is None
    assert Outcome.ONGOING.winner is None
