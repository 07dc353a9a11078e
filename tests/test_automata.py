import unittest
import contextlib, csv, io, json, os, tempfile

from lrzero.parsing.context_free import ContextFreeGrammar, Rule
from lrzero.parsing.items import Item
from lrzero.parsing.lr0 import lr0_construction

def expression_automaton():
	# Augmented:  0: E' -> E    1: E -> E + T    2: E -> T    3: T -> id
	return lr0_construction(ContextFreeGrammar([
		Rule('E', ('E', '+', 'T')),
		Rule('E', ('T',)),
		Rule('T', ('id',)),
	]))


class TestQueries(unittest.TestCase):
	def setUp(self):
		self.hfa = expression_automaton()

	def test_accept(self):
		self.assertEqual(1, self.hfa.accept)
		self.assertEqual([Item(0, 1), Item(1, 1)], self.hfa.kernel(1))

	def test_transitions(self):
		self.assertEqual([
			(0, 'E', 1), (0, 'T', 2), (0, 'id', 3),
			(1, '+', 4),
			(4, 'T', 5), (4, 'id', 3),
		], list(self.hfa.transitions()))

	def test_reductions(self):
		self.assertEqual([], self.hfa.reductions(0))
		self.assertEqual([], self.hfa.reductions(1))
		self.assertEqual([2], self.hfa.reductions(2))
		self.assertEqual([3], self.hfa.reductions(3))
		self.assertEqual([1], self.hfa.reductions(5))

	def test_kernel(self):
		self.assertEqual([Item(0, 0)], self.hfa.kernel(0))
		self.assertEqual([Item(1, 2)], self.hfa.kernel(4))

	def test_breadcrumbs(self):
		self.assertIsNone(self.hfa.breadcrumb(0))
		self.assertEqual('+', self.hfa.breadcrumb(4))
		self.assertEqual([0, 1, 4, 5], self.hfa.shortest_path_to(5))
		self.assertEqual(5, self.hfa.traverse(0, ['E', '+', 'T']))


class TestPresentation(unittest.TestCase):
	def setUp(self):
		self.hfa = expression_automaton()

	def test_pretty_print(self):
		out = io.StringIO()
		with contextlib.redirect_stdout(out): self.hfa.pretty_print()
		text = out.getvalue()
		self.assertTrue(text.startswith("I0:\nE' -> ● E\nE -> ● E + T\nE -> ● T\nT -> ● id\n"))
		self.assertIn("GOTO(I0,id)=I3\n", text)
		self.assertIn("I5:\nE -> E + T ●\n", text)
		self.assertIn("GOTO(I4,id)=I3\n", text)

	def test_transition_grid(self):
		grid = self.hfa.transition_grid()
		self.assertEqual(['', 'via', '+', 'E', 'T', 'id'], grid[0])
		self.assertEqual([0, '', '', 1, 2, 3], grid[1])
		self.assertEqual([4, '+', '', '', 5, 3], grid[5])
		out = io.StringIO()
		with contextlib.redirect_stdout(out): self.hfa.display()
		self.assertIn('│', out.getvalue())

	def test_grid_shows_falsy_breadcrumbs(self):
		hfa = lr0_construction(ContextFreeGrammar([Rule('S', (0,))]))
		grid = hfa.transition_grid()
		self.assertEqual(['', 'via', 0, 'S'], grid[0])
		self.assertEqual([0, '', 1, 2], grid[1])
		self.assertEqual([1, 0, '', ''], grid[2])
		self.assertEqual([2, 'S', '', ''], grid[3])

	def test_files(self):
		with tempfile.TemporaryDirectory() as folder:
			dot_path, csv_path = os.path.join(folder, 'a.dot'), os.path.join(folder, 'a.csv')
			self.hfa.make_dot_file(dot_path)
			self.hfa.make_csv(csv_path)
			with open(dot_path, encoding='utf-8') as fh: dot = fh.read()
			with open(csv_path, newline='', encoding='utf-8') as fh: rows = list(csv.reader(fh))
		self.assertTrue(dot.startswith('digraph {'))
		self.assertIn('0 -> 1 [label="E"]', dot)
		self.assertIn("E' -> ● E", dot)
		self.assertIn('4 -> 3 [label="id"]', dot)
		self.assertEqual(['', 'via', '+', 'E', 'T', 'id'], rows[0])
		self.assertEqual(7, len(rows))

	def test_serializable(self):
		data = json.loads(json.dumps(self.hfa.as_serializable()))
		self.assertEqual(1, data['accept'])
		self.assertEqual({'lhs': "E'", 'rhs': ['E']}, data['rules'][0])
		self.assertEqual([[0, 0], [1, 0], [2, 0], [3, 0]], data['states'][0]['items'])
		self.assertEqual({'E': 1, 'T': 2, 'id': 3}, data['states'][0]['shift'])
		self.assertEqual(6, len(data['states']))


if __name__ == '__main__':
	unittest.main()
