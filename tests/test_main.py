import unittest
import contextlib, io, json, os, tempfile

from lrzero.__main__ import parse_arguments, main

class TestCommandLine(unittest.TestCase):
	def setUp(self):
		self.folder = tempfile.TemporaryDirectory()
		self.addCleanup(self.folder.cleanup)

	def source(self, text, name='grammar.txt'):
		path = os.path.join(self.folder.name, name)
		with open(path, 'w') as fh: fh.write(text)
		return path

	def run_main(self, *argv):
		out, err = io.StringIO(), io.StringIO()
		with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
			main(parse_arguments(list(argv)))
		return out.getvalue(), err.getvalue()

	def test_prints_the_canonical_collection(self):
		out, err = self.run_main(self.source("E=E+T|T\nT=i\n"), '--plain')
		self.assertTrue(out.startswith("I0:\nE'->.E\nE->.E+T\nE->.T\nT->.i\nGOTO(I0,E)=I1\nGOTO(I0,T)=I2\nGOTO(I0,i)=I3\n"))
		self.assertIn("I1:\nE'->E.\nE->E.+T\nGOTO(I1,+)=I4\n", out)
		self.assertIn("GOTO(I4,i)=I3\n", out)
		self.assertNotIn("I6:", out)
		self.assertEqual('', err)

	def test_epsilon_alternative(self):
		out, err = self.run_main(self.source("S=A\nA=a|#\n"), '--plain')
		self.assertIn("A->.\n", out.split("\n\n")[0] + "\n")

	def test_grid(self):
		out, err = self.run_main(self.source("E = E + T | T\nT = id\n"), '--words', '--grid')
		self.assertIn("E -> E + T ●\n", out)
		self.assertIn('│', out)

	def test_verbose(self):
		out, err = self.run_main(self.source("E=E+T|T\nT=i\n"), '-v')
		self.assertIn('4 rules, 5 symbols, 6 states.', err)

	def test_grammar_fault_exits(self):
		path = self.source("S=aB\n")
		with self.assertRaises(SystemExit) as cm:
			self.run_main(path)
		self.assertEqual(1, cm.exception.code)

	def test_notation_fault_exits(self):
		with self.assertRaises(SystemExit) as cm:
			self.run_main(self.source("nonsense\n"))
		self.assertEqual(1, cm.exception.code)

	def test_writes_outputs(self):
		path = self.source("E=E+T|T\nT=i\n")
		target = os.path.join(self.folder.name, 'out.automaton')
		out, err = self.run_main(path, '-j', '--dot', '--csv', '-o', target)
		for suffix in ('', '.dot', '.csv'):
			self.assertTrue(os.path.exists(target+suffix), suffix)
		with open(target) as fh: data = json.load(fh)
		self.assertEqual(6, len(data['states']))
		self.assertIn('Wrote:', out)

	def test_default_target_name(self):
		path = self.source("S=a\n", name='tiny.txt')
		self.run_main(path, '-j')
		self.assertTrue(os.path.exists(os.path.join(self.folder.name, 'tiny.automaton')))

	def test_refuses_to_overwrite(self):
		path = self.source("S=a\n")
		target = os.path.join(self.folder.name, 'out.automaton')
		with open(target, 'w') as fh: fh.write('precious')
		with self.assertRaises(SystemExit):
			self.run_main(path, '-j', '-o', target)
		with open(target) as fh: self.assertEqual('precious', fh.read())
		self.run_main(path, '-j', '-o', target, '--force')
		with open(target) as fh: self.assertEqual(3, len(json.load(fh)['states']))


if __name__ == '__main__':
	unittest.main()
