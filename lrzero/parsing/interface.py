"""
Interface Definitions: shared constants and the things that can go wrong.
"""

AUGMENT_SUFFIX = "'"  # S' is the conventional name for the accept-symbol wrapping start-symbol S.
EPSILON_MARK = '#'  # How the textual notation spells an empty right-hand side.

class Fault(ValueError):
	""" Something is wrong with a grammar. Raised by the generic fault handler. """

class EmptyGrammarError(Fault):
	""" There are no rules, so there is no start symbol and nothing to build. """

class UndefinedNonterminalError(Fault):
	""" Some right-hand side mentions a non-terminal which no rule produces. """
	def __init__(self, symbols):
		self.symbols = frozenset(symbols)
		super().__init__("Undefined non-terminal symbol(s): %s."%', '.join(sorted(map(repr, self.symbols))))

class SymbolCollisionError(Fault):
	""" The synthesized accept-symbol is already taken by the grammar. """
	def __init__(self, symbol):
		self.symbol = symbol
		super().__init__("Cannot augment the grammar: symbol %r is already in use."%symbol)

class DuplicateRuleError(Fault):
	def __init__(self, rules):
		self.rules = list(rules)
		super().__init__("Duplicated rules at %s."%', '.join(str(r.provenance) for r in self.rules))

class DotOutOfRangeError(IndexError):
	"""
	Someone tried to advance a completed parse-item.
	This indicates a bug in whoever did it, not a problem with the grammar.
	"""

class NotationError(ValueError):
	""" A line of grammar text could not be understood. """
	def __init__(self, line_number, message):
		self.line_number = line_number
		super().__init__("Line %d: %s"%(line_number, message))
