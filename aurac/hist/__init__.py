"""The ``.history/`` store: takes, marks, streams, deltas and replay."""