import json

import pytest

from aria_snapshot import compress_accessibility_tree, compress_snapshot_text
from aria_snapshot.dom.parser import parse_snapshot
from aria_snapshot.dom.paths import encode_path
from aria_snapshot.dom.serializer.compressor import compress_line
from aria_snapshot.dom.serializer.serializer import SnapshotRenderer, render_snapshot
from aria_snapshot.exceptions import SnapshotStructureError

TREE = [
	{
		'generic [ref=e1]': [
			{'link "Models"': [{'/url': '/models'}]},
			'textbox "Search models"',
		]
	}
]

TREE_TEXT = '''- generic [ref=e1]:
  - link "Models":
    - /url: /models
  - textbox "Search models"'''


class TestSnapshotRenderer:
	def test_rendering_without_refs_is_unchanged(self):
		assert render_snapshot(TREE) == TREE_TEXT

	def test_rendered_text_parses_back(self):
		assert parse_snapshot(render_snapshot(TREE)) == TREE

	def test_refs_are_appended_by_path(self):
		path_refs = {
			encode_path((0, 'generic [ref=e1]', 1)): 'ab12',
			encode_path((0, 'generic [ref=e1]', 0, 'link "Models"')): 'cd34',
		}
		lines = render_snapshot(TREE, path_refs).split('\n')

		assert lines == [
			'- generic [ref=e1]:',
			'  - link "Models" [ref=cd34]:',
			'    - /url: /models',
			'  - textbox "Search models" [ref=ab12]',
		]

	def test_identical_labels_at_different_paths(self):
		tree = ['button "Go"', 'button "Go"']
		rendered = render_snapshot(tree, {encode_path((1,)): 'zz99'})
		assert rendered == '- button "Go"\n- button "Go" [ref=zz99]'

	def test_scalar_values_and_quoting(self):
		tree = {'heading "Title" [level=1]': 'a: b', 'generic': '', 'text': 'plain'}
		rendered = render_snapshot(tree)

		assert rendered.split('\n') == [
			'heading "Title" [level=1]: \'a: b\'',
			"generic: ''",
			'text: plain',
		]
		assert parse_snapshot(rendered) == tree

	def test_multi_key_list_items(self):
		tree = [{'a': 'x', 'b': ['c']}]
		assert render_snapshot(tree) == '- a: x\n  b:\n  - c'
		assert parse_snapshot(render_snapshot(tree)) == tree

	@pytest.mark.parametrize('text', ['a\t#b', 'a:\tb', 'a\rb', 'x\u2028y', 'a #b', 'key: value', '- dash', 'true', '123', ''])
	def test_awkward_text_parses_back(self, text):
		tree = [{'text': text}, {'generic': [text]}]
		assert parse_snapshot(render_snapshot(tree)) == tree

	def test_long_lines_are_not_folded(self):
		name = ' '.join(['word'] * 60)
		rendered = render_snapshot([f'link "{name}"'], {encode_path((0,)): 'ab12'})
		assert rendered == f'- link "{name}" [ref=ab12]'

	def test_empty_containers_render_as_empty_text(self):
		assert render_snapshot([]) == ''
		assert render_snapshot({}) == ''

	def test_json_output(self):
		rendered = SnapshotRenderer({encode_path((0, 'generic [ref=e1]')): 'q1w2'}, output_format='json').render(TREE)
		parsed = json.loads(rendered)
		assert 'generic [ref=e1] [ref=q1w2]' in parsed[0]

	def test_annotate_does_not_mutate_input(self):
		before = json.dumps(TREE)
		SnapshotRenderer({encode_path((0, 'generic [ref=e1]', 1)): 'ab12'}).annotate(TREE)
		assert json.dumps(TREE) == before

	def test_unsupported_values_report_their_path(self):
		with pytest.raises(SnapshotStructureError) as exc_info:
			render_snapshot({'list': ['ok', object()]})
		assert exc_info.value.path == ('list', 1)

	def test_non_string_keys_are_rejected(self):
		with pytest.raises(SnapshotStructureError) as exc_info:
			render_snapshot({'outer': {1: 'x'}})
		assert exc_info.value.path == ('outer',)


class TestCompressor:
	def test_compress_line(self):
		assert compress_line('  - link "Models" [ref=e7] [cursor=pointer]:') == ' l #Models ref=e7 cur:pointer'
		assert compress_line('- generic [active] [ref=e1]:') == 'g ref=e1'
		assert compress_line('- heading "Welcome" [level=2]') == 'h #Welcome lv:2'
		assert compress_line('- button "Save" [disabled]') == 'b #Save dis'

	def test_non_list_and_data_lines_are_dropped(self):
		assert compress_line('heading') is None
		assert compress_line('    - /url: /models') is None
		assert compress_line('   ') is None

	def test_compress_tree(self):
		content = '- navigation [ref=e3]:\n  - link "Docs" [ref=e10]:\n    - /url: /docs\n\n  - img [ref=e17]'
		assert compress_accessibility_tree(content) == 'nav ref=e3\n l #Docs ref=e10\n i ref=e17'

	def test_compress_snapshot_text(self):
		text = '### Snapshot\nyaml\n- button "Go" [ref=e2]\n  - img\n\nDone'
		assert compress_snapshot_text(text) == '### Snapshot\naccessibility-tree\nb #Go ref=e2\n i\n\nDone'

	def test_text_without_yaml_section_is_unchanged(self):
		assert compress_snapshot_text('nothing to see') == 'nothing to see'
