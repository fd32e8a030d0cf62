"""
Core application engine for placing a replacement song.

`SongReplacer` sequences the work: the locator finds the game's songs
directory, the resolver turns the source token into a local file, and the
transcoder puts it in place.
"""
