"""Tree objects for representing bracketed syntax trees."""
# The Tree class is an adaptation of the tree.py file from NLTK.
# Removed: tree positions, parented & immutable trees, drawing, &c.
# Original notice:
# Natural Language Toolkit: Text Trees
#
# Copyright (C) 2001-2010 NLTK Project
# Author: Edward Loper <edloper@gradient.cis.upenn.edu>
#         Steven Bird <sb@csse.unimelb.edu.au>
# URL: <http://www.nltk.org/>
# For license information, see LICENSE.TXT
import re

# a label is a sequence of non-whitespace, non-bracket characters,
# separated from the rest of the production by whitespace; the rest starts
# with a non-whitespace character.
LABELSPLITRE = re.compile(r'([^\s()]+)\s+(\S.*)$', flags=re.DOTALL)


class MalformedTree(ValueError):
	"""Raised when a bracketed tree string violates the tree format.

	:param treestr: the (sub)tree string that could not be parsed.
	:param reason: short description of the problem."""

	def __init__(self, treestr, reason):
		super().__init__('Malformed tree (%s): %s' % (reason, treestr))
		self.treestr = treestr
		self.reason = reason


class Tree(object):
	"""A labeled, n-ary tree structure.

	Each Tree represents a single hierarchical grouping. Non-terminal nodes
	carry a syntactic label, such as "NP" or "VP", and own a list of child
	Trees; terminal nodes carry a word as label and have no children.

	The constructor can be called in three ways:

	- ``Tree(label, children)`` constructs a new non-terminal node with the
		specified label and list of children.
	- ``Tree(word, terminal=True)`` constructs a terminal node.
	- ``Tree(s)`` constructs a new tree by parsing the string s. Equivalent to
		calling the class method ``Tree.parse(s)``.

	>>> tree = Tree('(S (NP (DT the) (NN dog)) (VP (VBD ran)))')
	>>> print(tree[0])
	(NP (DT the) (NN dog))
	>>> tree.leaves()
	['the', 'dog', 'ran']
	"""

	__slots__ = ('label', 'children', 'terminal')

	def __new__(cls, label_or_str=None, children=None, terminal=False):
		if label_or_str is None:
			return object.__new__(cls)  # used by copy.deepcopy
		if children is None and not terminal:
			if not isinstance(label_or_str, str):
				raise TypeError("%s: Expected a label and child list "
						"or a single string; got: %s" % (
						cls.__name__, type(label_or_str)))
			return cls.parse(label_or_str)
		if terminal and children:
			raise ValueError('a terminal node cannot have children.')
		if children is not None and (isinstance(children, str)
				or not hasattr(children, '__iter__')):
			raise TypeError("%s() argument 2 should be a list, not a "
					"string" % cls.__name__)
		return object.__new__(cls)

	def __init__(self, label_or_str, children=None, terminal=False):
		# When __new__ delegated to Tree.parse(), the returned tree has been
		# initialized already; do not overwrite it.
		if children is None and not terminal:
			return
		self.label = label_or_str
		self.children = [] if terminal else list(children)
		self.terminal = terminal

	@property
	def is_terminal(self):
		"""True if this node is a word rather than a syntactic category."""
		return self.terminal

	# === Comparison operators ==================================
	def __eq__(self, other):
		if not isinstance(other, Tree):
			return False
		return (self.label == other.label
				and self.terminal == other.terminal
				and self.children == other.children)

	def __ne__(self, other):
		return not self.__eq__(other)

	__hash__ = None

	# === Delegated list operations ==============================
	def __iter__(self):
		return self.children.__iter__()

	def __len__(self):
		return self.children.__len__()

	def __getitem__(self, index):
		return self.children.__getitem__(index)

	# === Basic tree operations =================================
	def leaves(self):
		""":returns: list containing the words of this tree, in order."""
		if self.terminal:
			return [self.label]
		leaves = []
		for child in self.children:
			leaves.extend(child.leaves())
		return leaves

	def height(self):
		""":returns: The longest distance from this node to a leaf node.

		- The height of a terminal is 1;
		- the height of a preterminal is 2;
		- the height of any other tree is one plus the maximum of its
			children's heights."""
		if self.terminal:
			return 1
		return 1 + max((child.height() for child in self.children),
				default=0)

	def subtrees(self, condition=None):
		"""Yield non-terminal subtrees in depth-first, pre-order traversal.

		:param condition: a function ``Tree -> bool`` to filter which nodes are
			yielded (does not affect whether children are visited)."""
		# Non-recursive version
		agenda = [self]
		while agenda:
			node = agenda.pop()
			if node.terminal:
				continue
			if condition is None or condition(node):
				yield node
			agenda.extend(node[::-1])

	def pos(self):
		""":returns: a list of (word, tag) tuples for the preterminals of this
			tree, in order."""
		return [(node[0].label, node.label) for node in self.subtrees()
				if len(node) == 1 and node[0].terminal]

	def childlabels(self):
		""":returns: the labels of the children of this node, in order."""
		return [child.label for child in self.children]

	# === Parsing ===============================================
	@classmethod
	def parse(cls, s):
		"""Parse a single-line bracketed tree string and return the tree.

		Trees are represented as nested bracketings, such as:
		``(S (NP (NNP John)) (VP (V runs)))``. A bracketing without nested
		brackets is a part-of-speech production; its text after the label is
		the word, which becomes a terminal child of the part-of-speech node.

		:raises MalformedTree: when the string is not exactly one well-formed
			tree; no partial tree is returned.

		>>> Tree.parse('(NN big dog)')[0].label
		'big dog'
		>>> Tree.parse('(S (NP x)')
		Traceback (most recent call last):
		...
		treegram.tree.MalformedTree: Malformed tree (unbalanced parentheses): \
S (NP x
		"""
		if not s or s[0] != '(' or s[-1] != ')':
			raise MalformedTree(s, 'expected outer parentheses')
		body = s[1:-1]
		match = LABELSPLITRE.match(body)
		if '(' not in body:
			if ')' in body:
				raise MalformedTree(body, 'unbalanced parentheses')
			if match is None:
				raise MalformedTree(body, 'expected label and word')
			label, word = match.groups()
			return cls(label, [cls(word, terminal=True)])
		if match is None:
			raise MalformedTree(body, 'expected label and children')
		label, childrenstr = match.groups()
		return cls(label, cls._parsechildren(childrenstr, body))

	@classmethod
	def _parsechildren(cls, childrenstr, body):
		"""Split a sequence of bracketed subtrees and parse each of them."""
		children = []
		depth = start = 0
		for n, char in enumerate(childrenstr):
			if char == '(':
				if depth == 0:
					start = n
				depth += 1
			elif char == ')':
				depth -= 1
				if depth < 0:
					raise MalformedTree(body, 'unbalanced parentheses')
				elif depth == 0:
					children.append(cls.parse(childrenstr[start:n + 1]))
			elif depth == 0 and not char.isspace():
				raise MalformedTree(body, 'text outside of subtree')
		if depth != 0:
			raise MalformedTree(body, 'unbalanced parentheses')
		return children

	# === String Representations ================================
	def __repr__(self):
		if self.terminal:
			return '%s(%r, terminal=True)' % (
					self.__class__.__name__, self.label)
		childstr = ", ".join(repr(c) for c in self)
		return '%s(%r, [%s])' % (self.__class__.__name__, self.label, childstr)

	def __str__(self):
		return self._pprint_flat()

	def _pprint_flat(self):
		"""Bracketed, single-line representation."""
		if self.terminal:
			return self.label
		return '(%s %s)' % (self.label,
				' '.join(child._pprint_flat() for child in self.children))

	def pprint(self, margin=70, indent=0):
		""":returns: A pretty-printed string representation of this tree.

		:param margin: The right margin at which to do line-wrapping.
		:param indent: The indentation level at which printing begins. This
			number is used to decide how far to indent subsequent lines."""
		# Try writing it on one line.
		s = self._pprint_flat()
		if len(s) + indent < margin or self.terminal:
			return s
		# If it doesn't fit on one line, then write it on multi-lines.
		s = '(%s' % self.label
		for child in self.children:
			s += '\n' + ' ' * (indent + 2) + child.pprint(margin, indent + 2)
		return s + ')'


__all__ = ['Tree', 'MalformedTree']
