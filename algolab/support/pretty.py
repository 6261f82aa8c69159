""" Bits and bobs in support of displaying experiment results. """

def print_grid(grid):
	"""
	Print a rectangular grid of cells with box-drawing rules, right-justifying each column.
	The first row is taken as a heading, and a divider follows it.
	"""
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
	print(upper.join(segments))
	for r, row in enumerate(grid):
		if r == 1: print(inner.join(segments))
		print(vertical.join(s.rjust(w,' ') for s,w in zip(row, width)))
	print(lower.join(segments))
