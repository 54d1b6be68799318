# chessgame

A chess game played in the terminal. Each side can be played by a human at
the keyboard or by a computer player that picks a random legal move.

## Installing

```
pip install .
```

## Playing

```
chessgame
```

The program first asks who plays white and who plays black (`1` for a human,
`2` for the computer). Before every move the board is drawn with Unicode
chess symbols on a checkerboard coloured with ANSI escape codes, rank eight
on top.

A human enters a move as four characters: the source square, then the target
square, for example `e2e4` (column letters may be upper or lower case;
whitespace between the characters is ignored). A character outside the
allowed range is rejected and asked for again; a move that is not among the
legal moves is rejected and the whole move is asked for again. The prompts
are in Polish.

When the game ends the result is printed: checkmate (`White Won` or
`Black Won`), stalemate, or a draw by the fifty-move rule.

Rules that are handled: moves of every kind of piece, captures, castling on
both sides (king and rook unmoved, squares between them empty and not
attacked, king not in check), en passant, and pawn promotion, which always
gives a queen.

## Using the library

The game model can be driven from code:

```python
from chessgame.state import State
from chessgame.enums import PlayerColor

state = State()
moves = state.legal_moves(PlayerColor.WHITE)
state.make_move(moves[0])
print(state.turn, state.has_concluded())
```

The main pieces:

- `chessgame.state.State` – board, move history (`move_history`), captured
  units (`taken_pieces`), `turn`, `conclusion` and the fifty-move counter.
  `make_move`, `legal_moves`, `is_check`, `is_attacked`, `has_moved`,
  `last_move`, `conclude` and `has_concluded` work on it. Making a move or
  concluding a game that has already ended raises
  `chessgame.exceptions.GameAlreadyFinishedError`.
- `chessgame.board.Board` – the 64 fields; `Board()` sets up the starting
  position, `Board(fields)` keeps the given fields and adds the missing ones
  empty. `field_at`, `field_of`, `units` and `king_field` look things up.
- `chessgame.game.Game` – two players of opposing colours and a user
  interface; `Game.run()` lets them move in turn until the game concludes.
- `chessgame.players.HumanPlayer` and `chessgame.players.ComputerPlayer` –
  both accept an optional `random.Random` as `rng`.
- `chessgame.ui.TextUI` – the console interface; it takes optional
  `input_stream` and `output_stream` (standard input and output by default),
  and `render_board(state)` returns the drawn board as a string.

Errors of the model derive from `chessgame.exceptions.ChessError`.

## What it does not do

- Moves are not checked for leaving one's own king in check, so a pinned
  piece may move.
- While a side is in check, only king and pawn moves are offered; other
  pieces have no moves that block or capture the checking piece.
- There is no draw by insufficient material or by repetition, no draw
  offers or resignation, and no choice of piece on promotion.
- The computer player does not search: it plays a random legal move.
- Games cannot be saved, loaded, or written out in any notation.

## Running the tests

```
pip install .[test]
pytest
```