"""
Build the canonical collection of LR(0) item sets for a grammar,
and show the item sets along with the GOTO transitions between them.

The grammar file holds lines like "E=E+T|T", with "#" for an empty alternative.
"""

import sys, os, argparse, json

from lrzero.parsing.interface import Fault, NotationError
from lrzero.parsing.notation import read_grammar
from lrzero.parsing.lr0 import lr0_construction

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m lrzero', description=__doc__,)
	parser.add_argument('source_path', help='path to input file')
	parser.add_argument('-w', '--words', action='store_true', help='symbols are whitespace-separated words, not single characters')
	parser.add_argument('--plain', action='store_true', help='print items in the terse A->x.y notation')
	parser.add_argument('--grid', action='store_true', help='also display the transition table in attractive grid format')
	parser.add_argument('-f', '--force', action='store_true', dest='force', help='allow to write over existing files')
	parser.add_argument('-o', '--output', help='path to output file (stem for --dot and --csv)')
	parser.add_argument('-j', '--json', action='store_true', help='write the automaton in JSON format')
	parser.add_argument('-i', '--indent', help='indent the JSON output for easier reading.', action='store_const', dest='indent', const=2, default=None)
	parser.add_argument('--csv', action='store_true', help='write the transition table as CSV, suitable for inspection.')
	parser.add_argument('--dot', action='store_true', help="create a .dot file for visualizing the automaton via the Graphviz package.")
	parser.add_argument('-v', '--verbose', action='store_true', help="squawk about the size of things")
	return parser.parse_args(argv)

def planned_outputs(args, target_path) -> list:
	paths = []
	if args.json: paths.append(target_path)
	if args.dot: paths.append(target_path+'.dot')
	if args.csv: paths.append(target_path+'.csv')
	return paths

def main(args):
	stem, extension = os.path.splitext(args.source_path)
	target_path = args.output or stem+'.automaton'
	if not args.force:
		for path in planned_outputs(args, target_path):
			if os.path.exists(path):
				print('Target file %s already exists and --force command-line argument was not given.'%path, file=sys.stderr)
				sys.exit(1)
	with open(args.source_path, encoding='utf-8') as fh: document = fh.read()
	try:
		grammar = read_grammar(document, words=args.words)
		grammar.validate(allow_duplicate_rules=True)
		automaton = lr0_construction(grammar)
	except (Fault, NotationError) as e:
		print(e.args[0], file=sys.stderr)
		sys.exit(1)
	if args.verbose:
		print('%d rules, %d symbols, %d states.'%(len(automaton.grammar.rules), len(automaton.grammar.symbols), len(automaton.graph)), file=sys.stderr)
	automaton.pretty_print(plain=args.plain)
	if args.grid: automaton.display()
	if args.dot: automaton.make_dot_file(target_path+'.dot')
	if args.csv: automaton.make_csv(target_path+'.csv')
	if args.json:
		with open(target_path, 'w', encoding='utf-8') as fh:
			json.dump(automaton.as_serializable(), fh, separators=(',', ':'), indent=args.indent)
	written = planned_outputs(args, target_path)
	if written:
		print('Wrote:')
		for path in written: print('\t'+path)

if __name__ == '__main__': main(parse_arguments())
