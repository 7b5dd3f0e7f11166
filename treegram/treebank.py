"""Read treebanks in bracket format, one tree per line."""
import logging
from .tree import Tree, MalformedTree
from .util import openread


def readtrees(lines, skipmalformed=False):
	"""Parse trees from an iterable of lines.

	Blank lines are ignored.

	:param skipmalformed: by default, the first malformed line raises
		``MalformedTree``, with the line number added to its message. When
		True, malformed lines are skipped with a warning.
	:yields: tuples ``(n, tree)`` where ``n`` is the 1-based line number.

	>>> [str(tree) for _, tree in readtrees(['(A x)', '', '(B y)'])]
	['(A x)', '(B y)']"""
	for n, line in enumerate(lines, 1):
		line = line.strip()
		if not line:
			continue
		try:
			tree = Tree.parse(line)
		except MalformedTree as err:
			if not skipmalformed:
				raise MalformedTree(err.treestr,
						'%s; line %d' % (err.reason, n)) from err
			logging.warning('skipping malformed tree on line %d: %s',
					n, err.reason)
			continue
		yield n, tree


def readtreebank(filename, encoding='utf8', skipmalformed=False):
	"""Read all trees in a file; ``-`` reads from standard input.

	:returns: a list of Tree objects, in the order of the file."""
	with openread(filename, encoding=encoding) as inp:
		trees = [tree for _, tree in readtrees(inp, skipmalformed)]
	logging.info('read %d trees from %s', len(trees), filename)
	return trees


__all__ = ['readtrees', 'readtreebank']
