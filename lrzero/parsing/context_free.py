"""
# Context Free Grammars

In pure form, a context free grammar (CFG) consists of:
	* A set of terminal symbols,
	* A set of non-terminal symbols, disjoint from the terminals,
	* A set of production rules, each consisting of:
		* left-hand side (exactly one symbol)
		* right-hand side (ordered sequence of zero or more symbols)
	* and a start symbol.

A rule is known by its position in the rule list, not by its text. One left-hand
side may have many alternatives, and each must remain individually addressable.


# Which symbols are non-terminal?

Any symbol with a production rule is non-terminal, obviously. But people adopt various
style-rules for representing the symbols in their grammars: upper-case letters for
non-terminals is the textbook convention. These strictures add a useful layer of
redundancy: a symbol that *looks* like a non-terminal but has no rules is probably
a typo, and it's far better to hear about that than to get a quietly-wrong automaton.

So a grammar may carry a predicate ``is_nonterminal``. A symbol is non-terminal if
it has rules OR the predicate says so. Validation then insists that every non-terminal
actually has rules. Without a predicate, the question is settled by the rules alone.


# The Augmented Grammar

The LR family of algorithms are normally explained in terms of an augmented grammar:
It has a special "accept" rule which just expands to the start symbol for the ordinary
context-free grammar at issue. There's a good reason for this: It makes the algorithms
work properly without a lot of special edge cases to worry about.

Here the accept rule is a first-class rule at index zero, and its left-hand side is
the start symbol with a prime mark attached. If that name is already taken, there is
no sensible way to proceed, so you get an exception instead of a subtly-broken table.
The ``ContextFreeGrammar`` object follows a builder pattern; the ``AugmentedGrammar``
it produces is a frozen value suitable for sharing among the construction algorithms.
"""

import collections, warnings
from typing import Callable, Hashable, NamedTuple, Optional, Protocol
from ..support import foundation, pretty
from .interface import (
	AUGMENT_SUFFIX, EmptyGrammarError, UndefinedNonterminalError, SymbolCollisionError, DuplicateRuleError,
)


def display_rules(rules):
	head = ['', 'Symbol', 'Produces']
	body = [[i, rule.lhs, ' '.join(map(str, rule.rhs))] for i,rule in enumerate(rules)]
	pretty.print_grid([head] + body)


class FaultHandler(Protocol):
	"""
	This generic handler raises exceptions for the serious problems
	and issues warnings for the merely suspicious ones.
	More sophisticated handlers might collect a complete read-out instead.
	"""
	def empty_grammar(self):
		raise EmptyGrammarError("A grammar needs at least one rule.")

	def undefined_nonterminals(self, symbols):
		raise UndefinedNonterminalError(symbols)

	def duplicate_rules(self, rules):
		raise DuplicateRuleError(rules)

	def unreachable_symbols(self, symbols):
		# Harmless to the construction, but probably not what the author meant.
		warnings.warn("Unreachable Symbols: %s."%', '.join(sorted(map(repr, symbols))))

class SimpleFaultHandler(FaultHandler):
	""" Protocols cannot be instantiated, so here's a simple way to get the default behavior. """
	pass


class Rule(NamedTuple):
	"""
	Arbitrary plain-jane BNF rule.

	lhs: The "left-hand-side" non-terminal symbol which is declared to produce...
	rhs: this "right-hand-side" sequence of symbols. An empty tuple is an epsilon-rule.
	provenance: Use this to indicate the provenance of the rule. It can be a source
	line number, or whatever else makes sense in your application.
	"""
	lhs: Hashable
	rhs: tuple[Hashable, ...]
	provenance: object = None

	def __str__(self):
		return "%s -> %s"%(self.lhs, ' '.join(map(str, self.rhs)))

	def as_dotted(self, position):
		rhs = [str(s) for s in self.rhs]
		rhs.insert(position, pretty.DOT)
		return str(self.lhs)+' -> '+(" ".join(rhs))


class ContextFreeGrammar:
	"""
	Context-free grammar under construction.

	You're expected to construct a grammar (possibly empty), give it a bunch of rules,
	and then call ``.augmented()`` to get the frozen form that the LR(0) construction needs.
	"""
	def __init__(self, rules=(), *, start=None, is_nonterminal:Optional[Callable[[Hashable], bool]]=None):
		self.symbols = set()
		self.rules:list[Rule] = []
		self.start = start  # If not given, the left-hand side of the first rule added.
		self.symbol_rule_ids = {}
		self.classifier = is_nonterminal
		for rule in rules: self.add_rule(rule)

	def display(self):
		display_rules(self.rules)

	def add_rule(self, rule:Rule):
		"""
		This is your basic mechanism to add BNF rules.
		It's responsible for various bits of internal accounting.
		:return: the new rule's index.
		"""
		if not isinstance(rule.rhs, tuple): rule = rule._replace(rhs=tuple(rule.rhs))
		if self.start is None: self.start = rule.lhs
		self.symbols.add(rule.lhs)
		self.symbols.update(rule.rhs)

		if rule.lhs not in self.symbol_rule_ids:
			# Don't use a defaultdict; we can't be adding keys by checking for them.
			self.symbol_rule_ids[rule.lhs] = []
		rule_id = foundation.allocate(self.rules, rule)
		self.symbol_rule_ids[rule.lhs].append(rule_id)
		return rule_id

	def is_nonterminal(self, symbol) -> bool:
		if symbol in self.symbol_rule_ids: return True
		return self.classifier is not None and bool(self.classifier(symbol))

	def nonterminals(self) -> set:
		return {s for s in self.symbols if self.is_nonterminal(s)}

	def apparent_terminals(self) -> set:
		return self.symbols - self.nonterminals()

	def accept_symbol(self):
		""" The name the augmented grammar will use for its accept-rule. """
		return str(self.start) + AUGMENT_SUFFIX

	def assert_not_empty(self, fault_handler:FaultHandler):
		if not self.rules: fault_handler.empty_grammar()

	def assert_all_defined(self, fault_handler:FaultHandler):
		""" Every symbol that is (or looks like) a non-terminal must have at least one rule. """
		wanted = self.nonterminals()
		if self.start is not None: wanted.add(self.start)
		undefined = wanted - self.symbol_rule_ids.keys()
		if undefined: fault_handler.undefined_nonterminals(undefined)

	def assert_no_orphans(self, fault_handler:FaultHandler):
		"""
		Every symbol should be reachable from the start symbol.
		This is a simple transitive closure.
		"""
		produces = collections.defaultdict(set)
		for rule in self.rules: produces[rule.lhs].update(rule.rhs)
		unreachable = self.symbols - foundation.transitive_closure([self.start], produces.get)
		if unreachable: fault_handler.unreachable_symbols(unreachable)

	def assert_no_duplicate_rules(self, fault_handler:FaultHandler):
		for symbol, rule_ids in self.symbol_rule_ids.items():
			inverse = collections.defaultdict(list)
			for r in rule_ids:
				inverse[self.rules[r].rhs].append(r)
			for rs in inverse.values():
				if len(rs) > 1:
					fault_handler.duplicate_rules([self.rules[r] for r in rs])

	def validate(self, fault_handler=SimpleFaultHandler(), allow_duplicate_rules=False):
		"""
		Calls the fault handler with every identified fault. The default fault handler
		raises an exception (derived from Fault) for the first serious error noticed,
		and merely warns about unreachable symbols.
		"""
		self.assert_not_empty(fault_handler)
		self.assert_all_defined(fault_handler)
		self.assert_no_orphans(fault_handler)
		if not allow_duplicate_rules:
			self.assert_no_duplicate_rules(fault_handler)

	def augmented(self) -> "AugmentedGrammar":
		"""
		Produce the frozen, augmented form of this grammar. Faults which would make the
		construction meaningless are always fatal here, regardless of any fault handler.
		"""
		handler = SimpleFaultHandler()
		self.assert_not_empty(handler)
		self.assert_all_defined(handler)
		accept = self.accept_symbol()
		if accept in self.symbols: raise SymbolCollisionError(accept)
		return AugmentedGrammar(accept, self)

	@classmethod
	def shorthand(cls, start:str, rules:dict):
		""" Just a quick way to enter a test-grammar of single-character symbols. """
		cfg = cls(start=start)
		for lhs, rhs in rules.items():
			for alt in rhs.split('|'):
				cfg.add_rule(Rule(lhs, tuple(alt)))
		return cfg


class AugmentedGrammar:
	"""
	The frozen form of a grammar, with the accept-rule ``S' -> S`` at index zero.
	Rule ``i`` of the source grammar appears here as rule ``i+1``.

	This object is shared by reference among the closure, goto, and construction
	algorithms; nothing ever mutates it, so all of its collections are immutable.
	"""
	def __init__(self, accept, grammar:ContextFreeGrammar):
		self.accept = accept
		self.start = grammar.start
		self.rules = (Rule(accept, (grammar.start,)),) + tuple(grammar.rules)
		self.symbols = frozenset(grammar.symbols | {accept})
		self.nonterminals = frozenset(grammar.nonterminals() | {accept})
		symbol_rule_ids = collections.defaultdict(list)
		for rule_id, rule in enumerate(self.rules):
			symbol_rule_ids[rule.lhs].append(rule_id)
		self.symbol_rule_ids = {symbol: tuple(ids) for symbol, ids in symbol_rule_ids.items()}

	def is_nonterminal(self, symbol) -> bool:
		return symbol in self.nonterminals

	def rules_for(self, symbol) -> tuple:
		""" Indices of the rules which produce ``symbol``; empty for a terminal. """
		return self.symbol_rule_ids.get(symbol, ())

	def terminals(self) -> frozenset:
		return self.symbols - self.nonterminals

	def sorted_symbols(self) -> list:
		""" The alphabet in a reproducible order. Symbols needn't be mutually comparable. """
		return sorted(self.symbols, key=str)

	def display(self):
		display_rules(self.rules)
