from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from c4engine.ai.base import Agent
from c4engine.ai.minimax_agent import MinimaxAgent
from c4engine.core.moves import make_move
from c4engine.core.rules import check_winner, is_board_full
from c4engine.game.results import calculate_score, completion_message, completion_title
from c4engine.game.state import GameState, new_game
from c4engine.types import Difficulty, PLAYER_ONE, PLAYER_TWO, other
from c4engine.ui.effects import thinking
from c4engine.ui.prompts import parse_move
from c4engine.ui.render import render

logger = logging.getLogger(__name__)


def apply_turn(state: GameState, col: int) -> Optional[GameState]:
    """
    Drop the current player's piece into `col`.

    Returns None (state unchanged) if the game is over or the column is full.
    On a win or draw the current player is kept and the game is marked over;
    otherwise the turn passes.
    """
    if state.is_game_over:
        return None

    board = make_move(state.board, col, state.current_player)
    if board is None:
        return None

    result = check_winner(board)
    move_count = state.move_count + 1

    if result.winner is not None or is_board_full(board):
        return replace(
            state,
            board=board,
            winner=result.winner,
            winning_cells=result.winning_cells,
            is_game_over=True,
            move_count=move_count,
        )

    return replace(
        state,
        board=board,
        current_player=other(state.current_player),
        winner=None,
        winning_cells=[],
        move_count=move_count,
    )


def ai_turn(state: GameState, agent: Agent) -> Optional[GameState]:
    # Win/draw must be settled before the AI is asked for a move.
    if state.is_game_over:
        return None
    col = agent.choose_move(state)
    if col is None:
        return None
    return apply_turn(state, col)


def _status(state: GameState, agent: Agent, difficulty: Difficulty) -> str:
    return f"You: {PLAYER_ONE} | AI: {agent.name} | Difficulty: {difficulty} | Moves: {state.move_count}"


def _ai_status(agent: Agent) -> str:
    info = getattr(agent, "last_info", None)
    if not info:
        return f"{agent.name} moved."
    if info.get("random"):
        return f"{agent.name} chose {info.get('move_col')} (random) | {info.get('time_ms')}ms"
    return (
        f"{agent.name} chose {info.get('move_col')} | "
        f"d={info.get('depth')} | "
        f"nodes={info.get('nodes')} | "
        f"cut={info.get('cutoffs')} | "
        f"{info.get('time_ms')}ms"
    )


def run_game(
    difficulty: Difficulty = "medium",
    agent: Optional[Agent] = None,
    show_thinking: bool = True,
) -> GameState:
    """Console game: the human plays PlayerOne, `agent` plays PlayerTwo."""
    if agent is None:
        agent = MinimaxAgent(difficulty=difficulty)

    state = new_game()
    message = "Your move."

    while not state.is_game_over:
        render(state.board, f"{_status(state, agent, difficulty)}\n{message}")

        if state.current_player == PLAYER_TWO:
            if show_thinking:
                nxt = thinking(f"{agent.name} is thinking", lambda: ai_turn(state, agent))
            else:
                nxt = ai_turn(state, agent)
            if nxt is None:
                # Unreachable once the draw check has run; stop rather than spin.
                logger.warning("AI had no move on a live board")
                break
            state = nxt
            message = _ai_status(agent)
            continue

        try:
            raw = input("Your move: ")
            move = parse_move(raw, state.board)
            if move is None:
                render(state.board, "Game quit.")
                return state
        except ValueError as e:
            message = str(e)
            continue

        nxt = apply_turn(state, move)
        if nxt is not None:
            state = nxt
            message = f"You chose {int(move) + 1}"

    score = calculate_score(state.winner, state.move_count, difficulty)
    logger.info(
        "game over: winner=%s moves=%d difficulty=%s score=%d",
        state.winner,
        state.move_count,
        difficulty,
        score,
    )
    render(
        state.board,
        f"{completion_title(state)}\n{completion_message(state, difficulty)}",
        highlight=state.winning_cells,
    )
    return state
