"""
The key to the whole LR genera is the notion of a parse-item (and subsets of them).
We think of a parse-item as a pair: a rule's index crossed with an index into
(or just past) that rule's right-hand side. The latter is conventionally drawn
as a dot, so it's called the dot position or "offset".

An item carries no text. It's a plain pair of integers, so it hashes, compares, and
sorts structurally, and any question about the symbols around the dot goes to the grammar.
"""

from typing import NamedTuple, Optional
from ..support import pretty
from .context_free import AugmentedGrammar, Rule
from .interface import DotOutOfRangeError

class Item(NamedTuple):
	rule_id: int
	offset: int

	def rule(self, grammar:AugmentedGrammar) -> Rule:
		return grammar.rules[self.rule_id]

	def symbol_after_dot(self, grammar:AugmentedGrammar) -> Optional[str]:
		""" None means end-of-rule. """
		rhs = grammar.rules[self.rule_id].rhs
		if self.offset < len(rhs): return rhs[self.offset]

	def is_reduce(self, grammar:AugmentedGrammar) -> bool:
		return self.offset == len(grammar.rules[self.rule_id].rhs)

	def advance(self, grammar:AugmentedGrammar) -> "Item":
		""" The successor item: dot moved one symbol to the right. """
		if self.is_reduce(grammar):
			raise DotOutOfRangeError("Cannot advance past the end of rule %d: %s"%(self.rule_id, self.rule(grammar)))
		return Item(self.rule_id, self.offset + 1)

	def as_dotted(self, grammar:AugmentedGrammar, *, plain=False) -> str:
		rule = self.rule(grammar)
		if plain: return pretty.compact_dotted(rule.lhs, rule.rhs, self.offset)
		return rule.as_dotted(self.offset)
