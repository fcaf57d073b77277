"""
pitfall — A console-based maze chase game.

This package exposes the core modules needed to run the game or build
tools on top of it:

  constants       – Cell enum, directions, key bindings, glyphs, ANSI codes.
  grid            – Grid, the bounds-checked cell buffer.
  entities        – Actor class.
  level           – MazeLevel move resolution and RenderModel.
  sequence        – LevelSequence, the ordered levels of a match.
  engine          – play_turn(), play_level(), play_match().
  level_manager   – parse_level() / load_levels() text loader.
  solver          – Pursuer mobility and goal reachability checks.
  renderer        – clear_screen(), render(), banners.
  keyboard        – Single-keypress input.
  levels          – Built-in level files.
"""
