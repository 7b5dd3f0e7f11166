"""Induce a PCFG from a treebank and binarize it.

Reads a treebank with one bracketed tree per line, and writes two grammar
files: the PCFG read off from the treebank, and its binarized version."""
import io
import ast
import logging
from .treebank import readtreebank
from .grammar import treebankgrammar, makerules, sortrules, writegrammar, \
		testgrammar
from .ruletransforms import binarizegrammar
from .util import openwrite

DEFAULTS = dict(
		prefix='X',  # prefix of artificial labels introduced by binarization
		skipmalformed=False,  # skip malformed trees instead of aborting
		sort=False,  # sort rules: phrasal rules by lhs, lexical rules by word
		encoding='utf8',  # encoding of treebank and grammar files
		verbosity=1)  # 0: warnings only, 1: progress, 2: debug


class DictObj(object):
	"""Trivial class to wrap a dictionary for reasons of syntactic sugar."""

	def __init__(self, *args, **kwds):
		self.__dict__.update(*args, **kwds)

	def __getattr__(self, name):
		"""Dummy function for suppressing pylint E1101 errors."""
		raise AttributeError('%r instance has no attribute %r.\n'
				'Available attributes: %r' % (
				self.__class__.__name__, name, self.__dict__.keys()))

	def __repr__(self):
		return '%s(%s)' % (self.__class__.__name__,
			',\n\t'.join('%s=%r' % a for a in self.__dict__.items()))


def parseparam(text):
	"""Parse comma-separated ``attribute=value`` pairs with literal values.

	>>> parseparam("prefix='Z', sort=True")
	{'prefix': 'Z', 'sort': True}"""
	try:
		node = ast.parse('dict(%s)' % text, mode='eval').body
	except SyntaxError as err:
		raise ValueError('could not parse parameters: %s' % err) from None
	if node.args:
		raise ValueError('parameters should be attribute=value pairs.')
	result = {}
	for keyword in node.keywords:
		try:
			result[keyword.arg] = ast.literal_eval(keyword.value)
		except ValueError:
			raise ValueError('value of %r is not a literal.'
					% keyword.arg) from None
	return result


def readparam(filename, **overrides):
	"""Parse a parameter file.

	:param filename: The file should contain a list of comma-separated
		``attribute=value`` pairs, where values are Python literals; e.g.::

			prefix='X',
			sort=True,

	:param overrides: values that take precedence over the file, e.g., from
		command line options.
	:returns: A DictObj with all keys of ``DEFAULTS``."""
	with io.open(filename, encoding='utf8') as fileobj:
		params = parseparam(fileobj.read())
	params.update(overrides)
	return getparams(params)


def getparams(params):
	"""Validate a dictionary of parameters and fill in defaults."""
	for key in params:
		if key not in DEFAULTS:
			raise ValueError('unrecognized option: %r' % key)
	result = DictObj({k: params.get(k, v) for k, v in DEFAULTS.items()})
	if not isinstance(result.prefix, str) or not result.prefix:
		raise ValueError('prefix should be a non-empty string: %r'
				% (result.prefix, ))
	if result.verbosity not in (0, 1, 2):
		raise ValueError('verbosity should be 0, 1, or 2: %r'
				% (result.verbosity, ))
	return result


def induce(trees, prefix='X', sort=False):
	"""Read off a PCFG from trees and binarize it.

	:returns: a tuple of rule lists ``(pcfg, binarized)``."""
	pcfg, _ = treebankgrammar(trees)
	rules = makerules(pcfg)
	if sort:
		rules = sortrules(rules)
	result, msg = testgrammar(rules)
	if not result:
		logging.warning(msg)
	else:
		logging.debug(msg)
	return rules, binarizegrammar(rules, prefix=prefix)


def runpipeline(treebankfile, pcfgfile, binarizedfile, prm=None):
	"""Read a treebank, and write its PCFG and binarized PCFG to files.

	:param prm: a DictObj with the structure of ``DEFAULTS``; if None,
		defaults are used.
	:returns: a tuple of rule lists ``(pcfg, binarized)``."""
	if prm is None:
		prm = getparams({})
	trees = readtreebank(treebankfile, encoding=prm.encoding,
			skipmalformed=prm.skipmalformed)
	rules, binarized = induce(trees, prefix=prm.prefix, sort=prm.sort)
	with openwrite(pcfgfile, encoding=prm.encoding) as out:
		out.write(writegrammar(rules))
	logging.info('wrote %d rules to %s', len(rules), pcfgfile)
	with openwrite(binarizedfile, encoding=prm.encoding) as out:
		out.write(writegrammar(binarized))
	logging.info('wrote %d rules to %s', len(binarized), binarizedfile)
	return rules, binarized


__all__ = ['DEFAULTS', 'DictObj', 'parseparam', 'readparam', 'getparams',
		'induce', 'runpipeline']
