"""
A terse textual notation for grammars, as found in compiler-course exercises:

	E=E+T|T
	T=(E)|i

One non-terminal per line, then ``=``, then alternatives separated by ``|``.
An alternative consisting of ``#`` (or of nothing at all) is an epsilon-rule.
The left-hand side of the first line is the start symbol.

By default every character is a symbol, and upper-case letters are non-terminals:
that's the classroom convention, and it means a capital letter without any rules
will be reported rather than quietly treated as a terminal. Whitespace is ignored.

For grammars with longer symbol names, pass ``words=True``: then alternatives are
split on whitespace, and non-terminals are exactly those symbols which have rules.

Blank lines and lines beginning with ``;`` are skipped.
"""

from typing import Iterable, Union
from .context_free import ContextFreeGrammar, Rule
from .interface import EPSILON_MARK, NotationError

def _classroom_convention(symbol) -> bool:
	return symbol.isupper()

def split_alternative(text:str, *, words:bool, epsilon:str) -> tuple:
	if words: symbols = tuple(text.split())
	else: symbols = tuple(c for c in text if not c.isspace())
	if symbols == (epsilon,): return ()
	return symbols

def read_grammar(lines:Union[str, Iterable[str]], *, words=False, epsilon=EPSILON_MARK) -> ContextFreeGrammar:
	"""
	Read the notation described above; return a ContextFreeGrammar.
	Each rule's provenance is the (one-based) line number it came from.
	"""
	if isinstance(lines, str): lines = lines.splitlines()
	cfg = ContextFreeGrammar(is_nonterminal=None if words else _classroom_convention)
	for line_number, line in enumerate(lines, 1):
		line = line.strip()
		if not line or line.startswith(';'): continue
		if '=' not in line:
			raise NotationError(line_number, "Expected something like 'A=alpha|beta' but got %r."%line)
		lhs, rhs = line.split('=', 1)
		lhs = lhs.strip()
		if not lhs:
			raise NotationError(line_number, "Missing the non-terminal on the left of '='.")
		if len(lhs.split()) > 1:
			raise NotationError(line_number, "The left-hand side %r must be a single symbol."%lhs)
		if not words and len(lhs) != 1:
			raise NotationError(line_number, "In character mode the left-hand side %r must be one character."%lhs)
		for alternative in rhs.split('|'):
			cfg.add_rule(Rule(lhs, split_alternative(alternative, words=words, epsilon=epsilon), line_number))
	return cfg
