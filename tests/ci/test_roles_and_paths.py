import pytest

from aria_snapshot.dom.paths import decode_path, encode_path, is_ancestor, iter_prefixes
from aria_snapshot.dom.roles import ARIA_ROLES, is_role_line, parse_role_line, parse_structural_line
from aria_snapshot.dom.views import OpaqueKey, RoleLine


class TestStructuralLineParser:
	def test_role_with_name_and_attributes(self):
		parsed = parse_structural_line('link "Models" [ref=e7] [cursor=pointer]')
		assert parsed == RoleLine(role='link', accessible_name='Models')

	def test_role_without_name(self):
		assert parse_structural_line('generic [active] [ref=e1]') == RoleLine(role='generic')
		assert parse_structural_line('listitem') == RoleLine(role='listitem')

	def test_role_match_is_case_insensitive_and_keeps_casing(self):
		assert parse_structural_line('Button "Go"') == RoleLine(role='Button', accessible_name='Go')

	def test_data_fields_are_opaque(self):
		assert parse_structural_line('/url') == OpaqueKey('/url')
		assert parse_structural_line('/button "Go"') == OpaqueKey('/button "Go"')

	def test_unknown_roles_are_opaque(self):
		assert parse_structural_line('text') == OpaqueKey('text')
		assert parse_structural_line('widget "Thing"') == OpaqueKey('widget "Thing"')
		assert parse_structural_line('') == OpaqueKey('')

	def test_helpers(self):
		assert parse_role_line('/url') is None
		assert parse_role_line('textbox "Search"') == RoleLine(role='textbox', accessible_name='Search')
		assert is_role_line('heading "Title" [level=1]')
		assert not is_role_line('are now available')

	def test_vocabulary_is_closed_and_sizable(self):
		assert len(ARIA_ROLES) >= 70
		assert all(role == role.lower() for role in ARIA_ROLES)


class TestPathCodec:
	def test_string_and_int_segments_do_not_collide(self):
		assert encode_path(('items', 0)) != encode_path(('items', '0'))

	def test_round_trip(self):
		path = ('generic [ref=e1]', 0, 'link "Models"', 2, '/url')
		assert decode_path(encode_path(path)) == path
		assert decode_path(encode_path(())) == ()

	def test_rejects_non_paths(self):
		with pytest.raises(ValueError):
			decode_path('{"a": 1}')
		with pytest.raises(ValueError):
			decode_path('[true]')

	def test_prefixes_and_ancestry(self):
		assert list(iter_prefixes(('a', 0))) == [(), ('a',), ('a', 0)]
		assert is_ancestor((), ('a',))
		assert is_ancestor(('a',), ('a', 0))
		assert not is_ancestor(('a', 0), ('a', 0))
		assert not is_ancestor(('b',), ('a', 0))
