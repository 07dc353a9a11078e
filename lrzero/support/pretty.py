""" Bits and bobs in support of visualizing item sets and transition tables. """
import csv

DOT = '\u25cf'
PLAIN_DOT = '.'

def compact_dotted(lhs, rhs, position):
	""" The terse textbook notation for an item: A->xy.z (with spaces if any symbol is a longer word) """
	text = [str(s) for s in rhs]
	glue = '' if all(len(s) == 1 for s in text) else ' '
	text.insert(position, PLAIN_DOT)
	return str(lhs)+'->'+glue.join(text)

def print_grid(grid):
	lens = list(map(len, grid))
	assert len(set(lens)) == 1, lens
	grid = [[str(cell) for cell in row] for row in grid]
	width = [max(map(len, column)) for column in zip(*grid)]
	horizontal = '\u2500'
	vertical = ' \u2502 '
	upper = horizontal + '\u252c' + horizontal
	inner = horizontal + '\u253c' + horizontal
	lower = horizontal + '\u2534' + horizontal
	segments = [horizontal*w for w in width]
	divider = inner.join(segments)
	print(upper.join(segments))
	for r, row in enumerate(grid):
		if r %5 == 1: print(divider)
		print(vertical.join(s.rjust(w,' ') for s,w in zip(row, width)))
	print(lower.join(segments))

def write_csv_grid(path, grid):
	with open(path, 'w', newline="", encoding='utf-8') as fh:
		csv.writer(fh).writerows(grid)
