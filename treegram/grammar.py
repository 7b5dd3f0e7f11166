"""Read off probabilistic context-free grammars from treebanks."""
import re
import logging
from collections import Counter
import numpy as np

# e.g., 'NP -> DT NN\t\t0.5' or 'DT -> * the\t\t1.0'
RULERE = re.compile(
		r'^(?P<LHS>\S+) -> (?P<LEX>\* )?(?P<RHS>\S.*?)\s*\t(?P<WEIGHT>\S+)$')
# a phrasal rule with '*' as first rhs symbol would read as a lexical rule
STAR, ESCAPEDSTAR = '*', '\\*'


class GrammarRule(object):
	"""An immutable weighted production ``lhs -> rhs``.

	:param lhs: the left hand side symbol.
	:param rhs: sequence of right hand side symbols; for a lexical rule, a
		single word.
	:param weight: the conditional probability of the rhs given the lhs.
	:param lexical: whether the rhs is a word rather than a nonterminal."""

	__slots__ = ('lhs', 'rhs', 'weight', 'lexical')

	def __init__(self, lhs, rhs, weight, lexical=False):
		object.__setattr__(self, 'lhs', lhs)
		object.__setattr__(self, 'rhs', tuple(rhs))
		object.__setattr__(self, 'weight', float(weight))
		object.__setattr__(self, 'lexical', lexical)

	def __setattr__(self, name, value):
		raise AttributeError('GrammarRule objects are immutable.')

	def __eq__(self, other):
		if not isinstance(other, GrammarRule):
			return NotImplemented
		return (self.lhs, self.rhs, self.weight, self.lexical) == (
				other.lhs, other.rhs, other.weight, other.lexical)

	def __hash__(self):
		return hash((self.lhs, self.rhs, self.weight, self.lexical))

	def __repr__(self):
		return '%s(%r, %r, %r, lexical=%r)' % (self.__class__.__name__,
				self.lhs, self.rhs, self.weight, self.lexical)

	def __str__(self):
		return printrule(self)


def productions(tree):
	"""Read off the CFG productions of a tree.

	Every non-terminal node yields one production; for a part-of-speech node
	the right hand side is its word.

	>>> from treegram.tree import Tree
	>>> productions(Tree('(S (NP (DT the) (NN dog)) (VP (VBD ran)))'))
	... # doctest: +NORMALIZE_WHITESPACE
	[('S', ('NP', 'VP')), ('NP', ('DT', 'NN')), ('DT', ('the',)),
	('NN', ('dog',)), ('VP', ('VBD',)), ('VBD', ('ran',))]
	"""
	return [(node.label, tuple(node.childlabels()))
			for node in tree.subtrees()]


def countrules(trees):
	"""Count productions and left hand sides in a sequence of trees.

	:returns: a tuple ``(rulecounts, unigramcounts)``. ``rulecounts`` maps
		each lhs to a Counter of rhs keys, where a rhs key is the
		space-separated sequence of rhs symbols. ``unigramcounts`` is a Counter
		with the number of times each label occurs as a non-terminal node."""
	rulecounts = {}
	unigramcounts = Counter()
	for tree in trees:
		for lhs, rhs in productions(tree):
			unigramcounts[lhs] += 1
			rulecounts.setdefault(lhs, Counter())[' '.join(rhs)] += 1
	return rulecounts, unigramcounts


def treebankgrammar(trees):
	"""Induce a PCFG with relative frequencies of productions.

	:returns: a tuple ``(pcfg, unigramcounts)``, where ``pcfg`` maps each
		lhs to a dictionary of rhs keys with their probability given the lhs.

	>>> from treegram.tree import Tree
	>>> pcfg, _ = treebankgrammar([Tree('(S (A a) (A b))')])
	>>> pcfg['A']
	{'a': 0.5, 'b': 0.5}"""
	trees = list(trees)
	rulecounts, unigramcounts = countrules(trees)
	pcfg = {lhs: {rhs: count / unigramcounts[lhs]
				for rhs, count in counts.items()}
			for lhs, counts in rulecounts.items()}
	logging.info('induced PCFG from %d trees with %d labels and %d rules',
			len(trees), len(pcfg), sum(len(a) for a in pcfg.values()))
	return pcfg, unigramcounts


def makerules(pcfg):
	"""Convert a PCFG dictionary to a list of GrammarRule objects.

	Rules are grouped by lhs in the iteration order of ``pcfg``. A rule is
	lexical when its rhs is a single symbol which does not occur as a lhs."""
	rules = []
	for lhs, probs in pcfg.items():
		for rhskey, prob in probs.items():
			rhs = rhskey.split()
			lexical = len(rhs) == 1 and rhs[0] not in pcfg
			rules.append(GrammarRule(lhs, rhs, prob, lexical))
	return rules


def sortrules(rules):
	"""Sort rules in two clusters: phrasal, lexical.

	1. phrasal rules, ordered by lhs symbol
	2. lexical rules, ordered by word

	The sort is stable, so rules with the same key keep their order."""
	def sortkey(rule):
		"""Sort key ``(lexical?, word or lhs)``."""
		return (rule.lexical, rule.rhs[0] if rule.lexical else rule.lhs)

	return sorted(rules, key=sortkey)


def printrule(rule):
	""":returns: a string representation of a rule, without weight."""
	if rule.lexical:
		return '%s -> * %s' % (rule.lhs, rule.rhs[0])
	rhs = list(rule.rhs)
	if rhs and rhs[0] == STAR:
		rhs[0] = ESCAPEDSTAR
	return '%s -> %s' % (rule.lhs, ' '.join(rhs))


def writegrammar(rules):
	"""Write rules in a simple text format, in the order of ``rules``.

	Each line has a rule and its weight, separated by two tabs; lexical rules
	mark their word with an asterisk::

		NP -> DT NN		0.5
		DT -> * the		1.0

	A phrasal rule whose first rhs symbol is ``*`` is written with ``\\*``
	in its place, so that it is not read back as a lexical rule::

		NN -> \\* foo		1.0

	:returns: the grammar as a string."""
	return ''.join('%s\t\t%r\n' % (printrule(rule), rule.weight)
			for rule in rules)


def convertweight(weight):
	"""Convert a weight in a string to a float.

	>>> [convertweight(a) for a in ('0.5', '0x1.0000000000000p-1', '1/2')]
	[0.5, 0.5, 0.5]"""
	if '/' in weight:
		a, b = weight.split('/')
		return float(a) / float(b)
	elif weight.startswith('0x'):
		return float.fromhex(weight)
	return float(weight)


def parserule(line):
	"""Parse a line in the format produced by ``writegrammar()``.

	>>> parserule('DT -> * the\\t\\t1.0')
	GrammarRule('DT', ('the',), 1.0, lexical=True)"""
	match = RULERE.match(line.strip())
	if match is None:
		raise ValueError('Malformed rule:\n%s' % line)
	try:
		weight = convertweight(match.group('WEIGHT'))
	except ValueError:
		raise ValueError('Malformed weight in rule:\n%s' % line) from None
	if match.group('LEX'):
		return GrammarRule(match.group('LHS'), [match.group('RHS')],
				weight, lexical=True)
	rhs = match.group('RHS').split()
	if rhs[0] == ESCAPEDSTAR:
		rhs[0] = STAR
	return GrammarRule(match.group('LHS'), rhs, weight)


def readgrammar(lines):
	"""Read rules written by ``writegrammar()``; blank lines are ignored.

	:returns: a list of GrammarRule objects."""
	return [parserule(line) for line in lines if line.strip()]


def testgrammar(rules, epsilon=1e-9):
	"""Test whether the weights of the rules for each lhs sum to 1.

	:returns: a tuple ``(result, msg)``; ``result`` is True when all sums
		are within ``epsilon`` of 1."""
	labels = sorted({rule.lhs for rule in rules})
	index = {label: n for n, label in enumerate(labels)}
	sums = np.zeros(len(labels))
	np.add.at(sums, np.array([index[rule.lhs] for rule in rules], dtype=int),
			np.array([rule.weight for rule in rules], dtype=float))
	bad = np.flatnonzero(np.abs(sums - 1.0) > epsilon)
	if len(bad) == 0:
		return True, ('All left hand sides sum to 1 +/- epsilon=%s'
				% epsilon)
	msg = 'Weights do not sum to 1 +/- epsilon=%s for:\n%s' % (
			epsilon, '\n'.join('\t%s: %g' % (labels[n], sums[n])
				for n in bad))
	return False, msg


def grammarinfo(rules):
	""":returns: a string with some statistics on a grammar."""
	if not rules:
		return 'empty grammar'
	lengths = np.array([len(rule.rhs) for rule in rules])
	lexical = sum(1 for rule in rules if rule.lexical)
	labels = {rule.lhs for rule in rules}
	longest = rules[int(lengths.argmax())]
	result = 'labels: %d' % len(labels)
	result += ' rules: %d lexical rules: %d' % (len(rules), lexical)
	result += ' non-lexical rules: %d\n' % (len(rules) - lexical)
	result += 'max rhs length: %d in %s' % (lengths.max(), printrule(longest))
	result += ' mean: %g\n' % lengths.mean()
	result += 'rules with rhs longer than 2: %d' % (lengths > 2).sum()
	return result


__all__ = ['GrammarRule', 'productions', 'countrules', 'treebankgrammar',
		'makerules', 'sortrules', 'printrule', 'writegrammar',
		'convertweight', 'parserule', 'readgrammar', 'testgrammar',
		'grammarinfo']
