"""
Of all the LR-style parsing methods, LR(0) is the least sophisticated and the easiest to understand.
It's also the functional foundation for all the rest, so it makes sense to start reading here.

Three operations do all the work:

* ``closure`` fills out an item set: wherever the dot sits before a non-terminal,
  each rule for that non-terminal could be starting right here, so in they go.
* ``goto`` answers "where do we end up after seeing this symbol?"
* ``lr0_construction`` is a subset-construction which discovers every item set
  reachable from the initial one, numbering each in order of discovery.

Item sets are frozensets, so two sets with the same members are the same state no
matter how either was assembled. That's what makes the deduplication trustworthy.
"""

from typing import Iterable, Optional, Union

from ..support.foundation import fixed_point, BreadthFirstTraversal
from .context_free import ContextFreeGrammar, AugmentedGrammar
from .items import Item
from .automata import LR0Automaton, LR0_State

ItemSet = frozenset  # of Item, always closed once it's a state.

def closure(items:Iterable[Item], grammar:AugmentedGrammar) -> ItemSet:
	"""
	Add an initial item for every rule of every non-terminal appearing just after a dot,
	repeating until nothing more gets added. The universe of items is finite, so this stops.
	"""
	def expand(item:Item):
		symbol = item.symbol_after_dot(grammar)
		if symbol is not None and grammar.is_nonterminal(symbol):
			return [Item(rule_id, 0) for rule_id in grammar.rules_for(symbol)]
	return frozenset(fixed_point(items, expand))

def goto(items:ItemSet, symbol, grammar:AugmentedGrammar) -> Optional[ItemSet]:
	"""
	Shift the dot over ``symbol`` wherever possible and close the result.
	None means there is no transition on that symbol, which is no error.
	"""
	core = [item.advance(grammar) for item in items if item.symbol_after_dot(grammar) == symbol]
	if core: return closure(core, grammar)

def lr0_construction(grammar:Union[ContextFreeGrammar, AugmentedGrammar]) -> LR0Automaton:
	"""
	In broad strokes, this is a subset-construction. The keys (by which nodes are identified)
	are closed sets of LR(0) parse items; the BreadthFirstTraversal numbers them in order of
	discovery, and visits each in that same order, including those discovered along the way.

	Symbols are tried in sorted order, so the same grammar always yields the same numbering.
	The item sets may also be found at automaton.bft.traversal.
	"""
	def build_state(item_set:ItemSet):
		shift = {}
		for symbol in alphabet:
			successor = goto(item_set, symbol, grammar)
			if successor is not None:
				shift[symbol] = bft.lookup(successor, breadcrumb=symbol)
		graph.append(LR0_State(items=item_set, shift=shift))

	if isinstance(grammar, ContextFreeGrammar): grammar = grammar.augmented()
	alphabet = grammar.sorted_symbols()
	bft = BreadthFirstTraversal()
	bft.lookup(closure([Item(0, 0)], grammar))
	graph = []
	bft.execute(build_state)
	return LR0Automaton(graph=graph, grammar=grammar, bft=bft)
