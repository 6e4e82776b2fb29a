import pytest

from connectfour.agent.minimax_agent import MinimaxAgent
from connectfour.agent.random_agent import RandomAgent
from connectfour.game.errors import NoLegalMovesError
from connectfour.game.game import ConnectFourGame


def test_random_agent_returns_legal_move():
    g = ConnectFourGame()
    agent = RandomAgent()
    for _ in range(10):
        move = agent.select_move(g)
        assert move in g.legal_moves()
        g.play(move)


def test_random_agent_name():
    assert RandomAgent().name == "RandomAgent"


def test_random_agent_full_board(drawn_board):
    g = ConnectFourGame()
    g.board = drawn_board
    with pytest.raises(NoLegalMovesError):
        RandomAgent().select_move(g)


def test_minimax_agent_name():
    assert MinimaxAgent(depth=4).name == "MinimaxAgent(d=4)"
    assert MinimaxAgent().depth == 15


def test_minimax_agent_blocks():
    g = ConnectFourGame()
    for column in (0, 0, 1, 1, 2):
        g.play(column)
    before = g.board.copy()
    assert MinimaxAgent(depth=4).select_move(g) == 3
    # Selecting does not play the move
    assert g.board == before
