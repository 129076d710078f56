from aria_snapshot.dom.parser import parse_snapshot
from aria_snapshot.dom.paths import encode_path
from aria_snapshot.dom.snapshot.collector import SnapshotCollector, collect_candidates
from aria_snapshot.dom.views import LocatorQuery


class TestSnapshotCollector:
	def test_unnamed_siblings_get_distinct_indices(self):
		tree = [{'list': ['listitem', 'listitem']}]
		candidates = collect_candidates(tree)

		assert [(c.role, c.sibling_index) for c in candidates] == [('list', 0), ('listitem', 0), ('listitem', 1)]
		list_query = candidates[0].query
		assert candidates[1].query.parent == list_query
		assert candidates[2].query.parent == list_query

	def test_named_role_lines_do_not_consume_indices(self):
		candidates = collect_candidates(['button "A"', 'button', 'button'])

		assert [(c.accessible_name, c.sibling_index) for c in candidates] == [('A', None), (None, 0), (None, 1)]

	def test_counters_are_shared_across_array_items(self):
		tree = [{'list': ['listitem']}, {'list': ['listitem']}]
		candidates = collect_candidates(tree)

		lists = [c for c in candidates if c.role == 'list']
		items = [c for c in candidates if c.role == 'listitem']
		assert [c.sibling_index for c in lists] == [0, 1]
		# each list opens its own scope
		assert [c.sibling_index for c in items] == [0, 0]
		assert items[0].query.parent != items[1].query.parent

	def test_counters_are_per_role(self):
		candidates = collect_candidates(['button', 'link', 'button', 'Link'])
		assert [(c.role, c.sibling_index) for c in candidates] == [('button', 0), ('link', 0), ('button', 1), ('Link', 1)]

	def test_text_filter_for_unnamed_string_values(self):
		candidates = collect_candidates({'generic [ref=e40]': '© 2025 Ollama', 'heading "Title"': 'subtitle'})

		assert candidates[0].text_filter == '© 2025 Ollama'
		assert candidates[0].sibling_index == 0
		assert candidates[1].text_filter is None
		assert candidates[1].accessible_name == 'Title'

	def test_empty_string_values_are_not_text_filters(self):
		candidates = collect_candidates({'button': ''})
		assert candidates[0].text_filter is None

	def test_opaque_keys_are_skipped_but_traversed(self):
		tree = {'/url': '/models', 'text': 'hello', 'data': {'button "Go"': ''}}
		candidates = collect_candidates(tree)

		assert len(candidates) == 1
		assert candidates[0].query == LocatorQuery(role='button', name='Go')
		assert candidates[0].paths == [('data', 'button "Go"')]

	def test_nested_queries_chain_to_nearest_role_line(self):
		tree = [{'navigation': [{'link "Models" [ref=e7]': [{'/url': '/models'}]}]}]
		candidates = collect_candidates(tree)

		link = candidates[1]
		assert link.query.parent == LocatorQuery(role='navigation', nth=0)
		assert link.path_key == encode_path((0, 'navigation', 0, 'link "Models" [ref=e7]'))

	def test_identical_queries_collapse(self):
		tree = [
			{
				'navigation': [
					{'link "Download"': [{'/url': '/a'}]},
					{'link "Download"': [{'/url': '/b'}]},
				]
			}
		]
		candidates = collect_candidates(tree)

		assert len(candidates) == 2
		download = candidates[1]
		assert download.paths == [
			(0, 'navigation', 0, 'link "Download"'),
			(0, 'navigation', 1, 'link "Download"'),
		]

	def test_same_name_under_different_parents_is_kept(self):
		tree = [{'banner': [{'link "Download"': ''}]}, {'contentinfo': [{'link "Download"': ''}]}]
		candidates = collect_candidates(tree)
		assert len([c for c in candidates if c.accessible_name == 'Download']) == 2

	def test_document_order(self, ollama_snapshot):
		candidates = SnapshotCollector(parse_snapshot(ollama_snapshot)).collect()
		roles = [c.role for c in candidates]

		assert roles[:4] == ['generic', 'banner', 'navigation', 'link']
		assert roles.index('textbox') < roles.index('main') < roles.index('contentinfo')

	def test_scalars_yield_nothing(self):
		assert collect_candidates('plain text') == []
		assert collect_candidates(None) == []
		assert collect_candidates([]) == []
