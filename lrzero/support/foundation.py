""" Small is beautiful. These algorithms need no introduction. """

from collections import deque

def allocate(a_list:list, item):
	"""
	Append an item to a list, and return the new item's index in that list.
	Too frequent an idiom not to abbreviate.
	"""
	idx = len(a_list)
	a_list.append(item)
	return idx

def transitive_closure(roots, successors) -> set:
	"""
	Breadth-first search for everything reachable from ``roots``.

	``roots`` is an iterable of hashable nodes, and ``successors(aNode)``
	returns an iterable of nodes (or ``None`` for a dead end).
	"""
	closure = set(roots)
	queue = deque(closure)
	while queue:
		more = successors(queue.popleft())
		if more is not None:
			for item in more:
				if item not in closure:
					closure.add(item)
					queue.append(item)
	return closure

def fixed_point(seed, expand) -> set:
	"""
	Grow a set by repeated full passes until a pass adds nothing new.

	Each pass works from a snapshot of the membership at the start of that pass,
	so anything ``expand(member)`` contributes gets its own turn on the next pass.
	``expand`` returns an iterable of new members (or ``None``).
	The result does not depend on the order in which members happen to be visited,
	provided ``expand`` depends only on its argument.
	"""
	result = set(seed)
	growing = True
	while growing:
		growing = False
		for member in tuple(result):
			more = expand(member)
			if more is None: continue
			for item in more:
				if item not in result:
					result.add(item)
					growing = True
	return result

class BreadthFirstTraversal:
	"""
	This object supports breadth-first graph discovery where nodes are identified by
	(hashable) keys and numbered in order of first sighting.

	Initialize the traversal's roots by calling .lookup(rootKey) as many times as necessary,
	then perform the traversal by calling .execute(visit). The "visit" parameter must be callable:
	it will be called once with each key this object encounters in a .lookup(...) call,
	including keys first seen during the traversal itself.
	In the end, the fields will have these meanings:

	current: the index of whichever key is currently being visited; ``None`` before and after processing.
	traversal: the list of keys in the order seen by .lookup(...)
	catalog: the mapping from key to traversal-index
	earliest_predecessor: reverse links pointing along a shortest/first-encountered path towards the root.
	breadcrumbs: Assuming edge-labels are provided with .lookup(key, breadcrumb=label), these are those labels.
	"""
	def __init__(self):
		self.current, self.traversal, self.catalog, self.earliest_predecessor, self.breadcrumbs = None, [], {}, [], []
	def execute(self, visit):
		""" visit(key) should call .lookup(successor_key, breadcrumb), which returns an integer. """
		for self.current, key in enumerate(self.traversal):
			visit(key)
		self.current = None
	def lookup(self, key, *, breadcrumb=None) -> int:
		if key not in self.catalog:
			self.catalog[key] = allocate(self.traversal, key)
			self.earliest_predecessor.append(self.current)
			self.breadcrumbs.append(breadcrumb)
		return self.catalog[key]
	def shortest_path_to(self, index:int) -> list:
		""" Return a minimal list of states traversed, from a root to the given node index, in normal order. """
		path = []
		while index is not None:
			path.append(index)
			index = self.earliest_predecessor[index]
		path.reverse()
		return path
