import pytest

from propconf.core.exceptions import InvalidEnumValueError, InvalidValueError
from propconf.store import ConfigStore, EnumConfigEntry

from conftest import Color


class TestEnumConfigEntry:
    """Test enum entries and their name-based text form."""

    def setup_method(self):
        """Set up test fixtures."""
        self.store = ConfigStore("enums", config_dir="unused")
        self.color = self.store.entry_builder().define_enum("color", Color.RED)

    def test_domain_in_declaration_order(self):
        assert self.color.get_enum_class() is Color
        assert self.color.get_enum_domain() == [Color.RED, Color.GREEN, Color.BLUE]
        assert self.color.get_options() == ["red", "green", "blue"]

    @pytest.mark.parametrize("text", ["blue", "BLUE", "Blue", " blue "])
    def test_text_lookup_is_case_insensitive(self, text):
        self.color.set_value_from_text(text)

        assert self.color.get_value() is Color.BLUE

    def test_unknown_name_raises(self):
        with pytest.raises(InvalidEnumValueError) as exc_info:
            self.color.set_value_from_text("purple")

        assert isinstance(exc_info.value, InvalidValueError)
        assert exc_info.value.key == "color"
        assert exc_info.value.options == ["red", "green", "blue"]
        assert self.color.get_value() is Color.RED

    def test_written_form_is_lowercase_name(self):
        self.color.set_value(Color.GREEN)

        assert self.color.format_value() == "green"
        assert self.color.format_value(self.color.default_value) == "red"

    def test_to_dict_lists_options(self):
        data = self.color.to_dict()

        assert isinstance(self.color, EnumConfigEntry)
        assert data['kind'] == "enum"
        assert data['options'] == ["red", "green", "blue"]
