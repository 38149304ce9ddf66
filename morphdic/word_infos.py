"""Detailed information about dictionary words."""

from __future__ import annotations

from dataclasses import dataclass, field

from morphdic.binary import ByteReader
from morphdic.word_id import WordId


@dataclass
class WordInfo:
    """Surface, forms, part of speech and splits of a word."""

    surface: str = ""
    head_word_length: int = 0
    pos_id: int = 0
    normalized_form: str = ""
    dictionary_form_word_id: int = 0
    dictionary_form: str = ""
    reading_form: str = ""
    a_unit_split: list[WordId] = field(default_factory=list)
    b_unit_split: list[WordId] = field(default_factory=list)
    word_structure: list[WordId] = field(default_factory=list)
    synonym_group_ids: list[int] = field(default_factory=list)


class WordInfos:
    """Offset table followed by variable-length word records."""

    def __init__(self, data, offset, word_size, has_synonym_group_ids):
        self.data = data
        self.offset = offset
        self.word_size = word_size
        self.has_synonym_group_ids = has_synonym_group_ids

    def _record_offset(self, word_id: int) -> int:
        return ByteReader(self.data, self.offset + 4 * word_id).u32()

    def _parse(self, position: int) -> WordInfo:
        reader = ByteReader(self.data, position)
        surface = reader.utf16_string()
        head_word_length = reader.string_length()
        pos_id = reader.u16()
        normalized_form = reader.utf16_string()
        dictionary_form_word_id = reader.i32()
        reading_form = reader.utf16_string()
        a_unit_split = reader.word_id_array()
        b_unit_split = reader.word_id_array()
        word_structure = reader.word_id_array()
        synonym_group_ids = reader.u32_array() if self.has_synonym_group_ids else []
        return WordInfo(
            surface=surface,
            head_word_length=head_word_length,
            pos_id=pos_id,
            normalized_form=normalized_form or surface,
            dictionary_form_word_id=dictionary_form_word_id,
            dictionary_form=surface,
            reading_form=reading_form,
            a_unit_split=a_unit_split,
            b_unit_split=b_unit_split,
            word_structure=word_structure,
            synonym_group_ids=synonym_group_ids,
        )

    def get_word_info(self, word_id) -> WordInfo:
        """Read the info of a word, resolving its dictionary form."""
        info = self._parse(self._record_offset(word_id))
        form_id = info.dictionary_form_word_id
        if form_id >= 0 and form_id != word_id:
            info.dictionary_form = self.get_word_info(form_id).surface
        return info