"""Cross out the last word of a line — one call, no editor needed."""

from penmode import resolve

line = "the quick fox"
result = resolve(line, len(line))
print(result.apply(line))  # the quick ~~fox~~
print("cursor ->", result.new_cursor)

# Triggering again right after the mark does nothing
print(resolve(result.apply(line), result.new_cursor))
