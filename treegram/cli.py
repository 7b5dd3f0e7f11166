"""Command-line interfaces to modules."""
import logging
from sys import argv, stderr
from sys import exit as sysexit
from getopt import gnu_getopt, GetoptError

COMMANDS = {
		'grammar': 'Read off a PCFG from a treebank and binarize it.',
		'binarize': 'Binarize the rules of a PCFG file.',
	}
LOGLEVELS = {0: logging.WARNING, 1: logging.INFO, 2: logging.DEBUG}


def main(args=None):
	"""Expose command-line interfaces."""
	from os.path import basename
	thiscmd = basename(argv[0])
	if args is None:
		args = argv[1:]
	if len(args) == 1 and args[0] in ('-v', '--version'):
		from treegram import __version__
		print(__version__)
	elif not args or args[0] not in COMMANDS:
		print('Usage: %s <command> [arguments]\n' % thiscmd, file=stderr)
		print('Command is one of:', file=stderr)
		for a, b in COMMANDS.items():
			print('   %s  %s' % (a.ljust(15), b), file=stderr)
		print('for additional instructions issue: %s <command> --help'
			% thiscmd, file=stderr)
		sysexit(2)
	else:
		globals()[args[0]](args[1:])


def usage(func, err=None):
	"""Print error and usage of a command, and exit."""
	if err is not None:
		print('error: %s' % err, file=stderr)
	print(func.__doc__, file=stderr)
	sysexit(2)


def grammar(args=None):
	"""Read off a PCFG from a treebank and binarize it.
Usage: treegram grammar <treebank> <pcfg> <binarized> [options]

The treebank should contain one bracketed tree per line; '-' reads from
standard input. Writes the PCFG read off from the treebank to <pcfg>, and its
binarized version to <binarized>. Files ending in .gz are (de)compressed.

Options:
  --param=<file>   read options from parameter file with key=value pairs.
  --prefix=X       prefix for artificial labels introduced by binarization.
  --skipmalformed  skip malformed trees instead of aborting.
  --sort           sort phrasal rules by label, lexical rules by word.
  --encoding=x     encoding of input and output files [default: utf8].
  --verbosity=n    0: only warnings, 1: progress [default], 2: debug."""
	from .pipeline import readparam, getparams, runpipeline
	from .grammar import grammarinfo
	if args is None:
		args = argv[2:]
	options = ('help', 'param=', 'prefix=', 'skipmalformed', 'sort',
			'encoding=', 'verbosity=')
	try:
		opts, args = gnu_getopt(args, 'h', options)
	except GetoptError as err:
		usage(grammar, err)
	opts = dict(opts)
	if '-h' in opts or '--help' in opts:
		usage(grammar)
	if len(args) != 3:
		usage(grammar, 'incorrect number of arguments')
	treebankfile, pcfgfile, binarizedfile = args
	overrides = {}
	for key in ('prefix', 'encoding'):
		if '--' + key in opts:
			overrides[key] = opts['--' + key]
	for key in ('skipmalformed', 'sort'):
		if '--' + key in opts:
			overrides[key] = True
	try:
		if '--verbosity' in opts:
			overrides['verbosity'] = int(opts['--verbosity'])
		if '--param' in opts:
			prm = readparam(opts['--param'], **overrides)
		else:
			prm = getparams(overrides)
	except ValueError as err:
		usage(grammar, err)
	logging.basicConfig(level=LOGLEVELS[prm.verbosity], format='%(message)s')
	rules, binarized = runpipeline(treebankfile, pcfgfile, binarizedfile, prm)
	logging.info(grammarinfo(rules))
	logging.info('after binarization:\n%s', grammarinfo(binarized))


def binarize(args=None):
	"""Binarize the rules of a PCFG file.
Usage: treegram binarize <pcfg> <binarized> [options]

Reads rules in the format written by 'treegram grammar', and writes them with
each rule of more than two right hand side symbols replaced by a chain of
binary rules.

Options:
  --prefix=X       prefix for artificial labels introduced by binarization.
  --encoding=x     encoding of input and output files [default: utf8].
  --verbosity=n    0: only warnings, 1: progress [default], 2: debug."""
	from .util import openread, openwrite
	from .grammar import readgrammar, writegrammar
	from .ruletransforms import binarizegrammar
	if args is None:
		args = argv[2:]
	try:
		opts, args = gnu_getopt(args, 'h',
				('help', 'prefix=', 'encoding=', 'verbosity='))
		opts = dict(opts)
		verbosity = int(opts.get('--verbosity', 1))
		if verbosity not in LOGLEVELS:
			raise ValueError('verbosity should be 0, 1, or 2.')
	except (GetoptError, ValueError) as err:
		usage(binarize, err)
	if '-h' in opts or '--help' in opts:
		usage(binarize)
	if len(args) != 2:
		usage(binarize, 'incorrect number of arguments')
	logging.basicConfig(level=LOGLEVELS[verbosity], format='%(message)s')
	encoding = opts.get('--encoding', 'utf8')
	with openread(args[0], encoding=encoding) as inp:
		rules = readgrammar(inp)
	binarized = binarizegrammar(rules, prefix=opts.get('--prefix', 'X'))
	with openwrite(args[1], encoding=encoding) as out:
		out.write(writegrammar(binarized))
	logging.info('wrote %d rules to %s', len(binarized), args[1])


if __name__ == "__main__":
	main()

__all__ = ['grammar', 'binarize', 'main']
