# mysterymanor

A murder-mystery puzzle game drawn with pygame in a 1600 by 1600 window.
You arrive at an old house, read letters and riddles as they are typed out
on screen, then answer a quiz whose answers spell out a passcode. Type the
passcode correctly to finish; get it wrong and you must win a penalty
shoot-out instead.

## Installing

```
pip install .
```

## Playing

```
mysterymanor [--assets DIR]
```

`--assets` names the directory holding the game's files; it defaults to the
current directory. The game expects there:

- `Pics/` – backgrounds, sprites, hearts, the light bulb and hint pictures
  (`question1hint.png` to `question9hint.png`)
- `TextFiles/` – the introduction texts (`intro.txt`, `intro2.txt`,
  `intro3.txt`, `riddle.txt`, `riddle2.txt`)
- `Textfiles/riddleGame.txt` – the riddle shown at the start of level 1
- the fonts `PixelifySans-Medium.ttf` and `arial.ttf`
- the background music file whose name is `MUSIC_FILE` in `mysterymanor.app`

The music file is required: without it the game prints
`Error: Could not load music file!` and exits with status 1. A missing
picture ends the current scene with an error message and exit status 1,
except for the light bulb and hint pictures, which are only reported. A
missing font falls back to pygame's default font; a missing introduction
text shows nothing, and a missing riddle file shows
`Error: Could not load riddle.`

The exit status is 0 when the game is finished or the window is closed,
and 1 on a failure.

### How a run goes

1. **Loading screen.** A cover picture for two seconds, then
   `Loading....` typed out letter by letter until twelve seconds have
   passed, then a START button. Clicking the button moves on.
2. **Introduction.** Timed pictures of the house and letters, each followed
   by a typed text. It plays through on its own.
3. **Level 1.** Click START, read the riddle, then click anywhere outside
   the riddle to begin. A five-minute clock counts down on screen.
   - Nine multiple-choice questions. A right answer on the first try earns
     5 points; every right answer adds its first letter to the anagram at
     the bottom. From the second wrong try on one question, each wrong try
     costs a life. Losing the last life ends the game.
   - The light bulb buys a hint picture for 25 points, when you have them.
     Click outside the hint to close it.
   - After the ninth question, click the input box, type the passcode and
     press Enter. The right passcode earns 80 points and finishes the game.
   - A wrong passcode leads to a "try again" screen and then to the
     shoot-out: score three goals past a goalkeeper who speeds up after
     each goal, within 90 seconds. Winning finishes the game; losing ends
     it with exit status 1.

You start with 5 lives and 50 points.

## Using the pieces

The game rules are plain Python objects that can be driven without a
window:

- `mysterymanor.player.Player` – lives and points, with `add_points`,
  `deduct_points` and `lose_life` (never below zero).
- `mysterymanor.questions.Question` – a question with `is_correct(index)`
  and `initial(index)`.
- `mysterymanor.level1.Level1` – the level's state: `answer`, `buy_hint`,
  `type_char`, `submit_passcode`; `default_questions()` and
  `countdown_text(seconds)` sit alongside it.
- `mysterymanor.typewriter.Typewriter` – reveals a text one character per
  `advance()`.
- `mysterymanor.loader.GameLoader.stage_at(elapsed)` and
  `mysterymanor.intro.Intro.phase_at(elapsed)` – which screen or phase is
  shown at a given moment; `phase_times(durations)` gives phase start times.
- `mysterymanor.minigames` – `Box`, `move_target`, `projectile_step`,
  `check_collision` and `clock_text`.
- `mysterymanor.shadow_strikes.ShadowStrikes` and
  `mysterymanor.mourning_sky.MourningSky` – the mini games; `step(elapsed,
  click)` advances one frame, `play(stage)` runs it in a window.
- `mysterymanor.screen.create_stage(root)` opens the window and returns a
  `Stage`.

## What it does not do

The game ends after level 1; there are no further levels. The bird-shooting
game `MourningSky` is included as a class but no scene of the game starts
it. Nothing is saved between runs.

## Running the tests

```
pip install ".[test]"
pytest
```