"""
The finished product of the LR(0) construction: a numbered list of states, each a closed
item set with its outbound transitions, along with the augmented grammar it describes.

States refer to each other only by number. Cycles in the transition graph are just
numbers that point backwards; nothing owns anything else.

Once built, an automaton is only ever read: queried, printed, or written out in
various formats for inspection by humans or other programs.
"""
from typing import Iterable, Iterator, NamedTuple
from ..support import foundation, pretty
from .context_free import AugmentedGrammar
from .items import Item


class LR0_State(NamedTuple):
	"""
	The LR(0) construction completely ignores right-context.
	A state is exactly its (closed) item set, plus where each symbol leads.
	"""
	items: frozenset  # of Item
	shift: dict  # symbol => state-id

	def sorted_items(self) -> list[Item]:
		return sorted(self.items)


class LR0Automaton:
	"""
	Fields are:
	graph: a list of LR0_State objects; their index is implicitly their node ID.
		State zero is the initial state.
	grammar: the AugmentedGrammar whose rule indices the parse-items refer to.
	bft: The BreadthFirstTraversal object which was used for the construction.
		This happens to be greatly useful in various diagnostic and other capacities.
	"""
	graph: list[LR0_State]
	grammar: AugmentedGrammar
	bft: foundation.BreadthFirstTraversal

	def __init__(self, *, graph, grammar, bft):
		self.graph, self.grammar, self.bft = graph, grammar, bft

	def traverse(self, q: int, symbols:Iterable) -> int:
		""" Starting in state q, follow the shifts for symbols, and return the resulting state ID. """
		for s in symbols: q = self.graph[q].shift[s]
		return q

	@property
	def accept(self) -> int:
		""" The state reached by recognizing the start symbol from the initial state. """
		return self.graph[0].shift[self.grammar.start]

	def transitions(self) -> Iterator[tuple]:
		""" Yield (state, symbol, successor) triples, by state and then by symbol. """
		for q, state in enumerate(self.graph):
			for symbol in sorted(state.shift, key=str):
				yield q, symbol, state.shift[symbol]

	def reductions(self, q:int) -> list[int]:
		""" Rule IDs (augmented numbering) of the completed items in state q, less the accept-rule. """
		return sorted(item.rule_id for item in self.graph[q].items if item.rule_id and item.is_reduce(self.grammar))

	def kernel(self, q:int) -> list[Item]:
		""" Items which came by shifting into this state, rather than by closure. """
		return sorted(item for item in self.graph[q].items if item.offset or item.rule_id == 0)

	def breadcrumb(self, q:int):
		""" The symbol shifted to first reach state q, or None for the initial state. """
		return self.bft.breadcrumbs[q]

	def shortest_path_to(self, q:int) -> list[int]:
		return self.bft.shortest_path_to(q)

	def pretty_print(self, *, plain=False):
		""" Print the canonical collection in the classic textbook layout. """
		for q, state in enumerate(self.graph):
			print("I%d:"%q)
			for item in state.sorted_items():
				print(item.as_dotted(self.grammar, plain=plain))
			for symbol in sorted(state.shift, key=str):
				print("GOTO(I%d,%s)=I%d"%(q, symbol, state.shift[symbol]))
			print()

	def transition_grid(self) -> list[list]:
		alphabet = [s for s in self.grammar.sorted_symbols() if s != self.grammar.accept]
		head = ['', 'via'] + alphabet
		body = []
		for q, state in enumerate(self.graph):
			crumb = self.breadcrumb(q)
			via = '' if crumb is None else crumb  # Symbols may be falsy, like 0.
			body.append([q, via] + [state.shift.get(symbol, '') for symbol in alphabet])
		return [head] + body

	def display(self):
		pretty.print_grid(self.transition_grid())

	def make_csv(self, path):
		pretty.write_csv_grid(path, self.transition_grid())

	def make_dot_file(self, path):
		""" Make a file suitable for the "dot" application from the Graphviz package. """
		def quote(text):
			return text.replace('\\', '\\\\').replace('"', r'\"')
		with open(path, 'w', encoding='utf-8') as fh:
			fh.write("digraph {\n")
			fh.write("\tnode [shape=box]\n")
			for q, state in enumerate(self.graph):
				lines = ["I%d"%q] + [item.as_dotted(self.grammar) for item in state.sorted_items()]
				fh.write("\t%d [label=\"%s\\l\"]\n"%(q, '\\l'.join(map(quote, lines))))
			for q, symbol, r in self.transitions():
				fh.write("\t%d -> %d [label=\"%s\"]\n"%(q, r, quote(str(symbol))))
			fh.write('}\n')

	def as_serializable(self) -> dict:
		""" Plain lists and dicts, ready for the json module. Symbols become strings. """
		return {
			'rules': [{'lhs': str(rule.lhs), 'rhs': [str(s) for s in rule.rhs]} for rule in self.grammar.rules],
			'states': [
				{
					'items': [list(item) for item in state.sorted_items()],
					'shift': {str(symbol): r for symbol, r in state.shift.items()},
				}
				for state in self.graph
			],
			'accept': self.accept,
		}
