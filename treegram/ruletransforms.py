"""Grammar transformations: binarization of rules.

A rule with more than two right hand side symbols is factored into a
left-branching chain of binary rules. For each rule ``A -> B C D E`` with
weight p, the chain is::

	X1 -> B C	1.0
	X2 -> X1 D	1.0
	A -> X2 E	p

The artificial symbols are numbered with a counter that is shared by all rules
of a grammar, so that each chain introduces its own symbols."""
import logging
from .grammar import GrammarRule


class SymbolCollision(ValueError):
	"""Raised when a new artificial symbol is already used by the grammar."""

	def __init__(self, symbol):
		super().__init__('artificial symbol %r already occurs in grammar; '
				'use a different prefix.' % symbol)
		self.symbol = symbol


class UniqueIDs(object):
	"""Produce strings with numeric IDs.

	Used as iterator; IDs are never re-used.

	>>> ids = UniqueIDs('X', start=1)
	>>> print(next(ids), next(ids))
	X1 X2"""

	def __init__(self, prefix='', start=0):
		self.cnt = start  # next available ID
		self.prefix = prefix

	def __next__(self):
		self.cnt += 1
		return '%s%d' % (self.prefix, self.cnt - 1)

	def __iter__(self):
		return self


def grammarsymbols(rules):
	"""Collect the nonterminal symbols of a grammar; words are excluded."""
	symbols = set()
	for rule in rules:
		symbols.add(rule.lhs)
		if not rule.lexical:
			symbols.update(rule.rhs)
	return symbols


def binarizerule(rule, ids, reserved=()):
	"""Binarize a single rule with a left-branching chain of binary rules.

	:param ids: iterator producing new symbols, e.g., ``UniqueIDs``.
	:param reserved: container of symbols which may not be produced by
		``ids``.
	:returns: a list of rules: the new binary rules in the order they are
		introduced, followed by a rule with the lhs and weight of the original
		rule. Rules with at most two rhs symbols are returned unchanged.
	:raises SymbolCollision: if ``ids`` produces a symbol in ``reserved``.

	>>> rule = GrammarRule('A', ['B', 'C', 'D'], 0.5)
	>>> for a in binarizerule(rule, UniqueIDs('X', start=1)):
	...     print(a, a.weight)
	X1 -> B C 1.0
	A -> X1 D 0.5"""
	result = []
	rhs = rule.rhs
	while len(rhs) > 2:
		newlabel = next(ids)
		if newlabel in reserved:
			raise SymbolCollision(newlabel)
		result.append(GrammarRule(newlabel, rhs[:2], 1.0))
		rhs = (newlabel, ) + rhs[2:]
	if not result:
		return [rule]
	result.append(GrammarRule(rule.lhs, rhs, rule.weight))
	return result


def binarizegrammar(rules, prefix='X', ids=None):
	"""Binarize all rules of a grammar, preserving their order.

	:param rules: a sequence of GrammarRule objects, e.g., as produced by
		``makerules()``.
	:param prefix: prefix for the labels of artificial nonterminals; they
		are numbered starting from 1: X1, X2, ...
	:param ids: optionally, a ``UniqueIDs`` object to continue numbering
		from; overrides ``prefix``.
	:returns: a new list of rules where each rhs has at most two symbols.
	:raises SymbolCollision: if an artificial symbol already occurs in
		``rules``. Nothing is returned in this case."""
	if ids is None:
		ids = UniqueIDs(prefix, start=1)
	reserved = grammarsymbols(rules)
	result = []
	binarized = 0
	for rule in rules:
		if len(rule.rhs) > 2:
			result.extend(binarizerule(rule, ids, reserved))
			binarized += 1
		else:
			result.append(rule)
	logging.info('binarized %d of %d rules; %d rules after binarization',
			binarized, len(rules), len(result))
	return result


__all__ = ['SymbolCollision', 'UniqueIDs', 'grammarsymbols', 'binarizerule',
		'binarizegrammar']
