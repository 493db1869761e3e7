# charinfo/__init__.py

from .classifier import BASIC_LATIN, CharacterClassifier, Classification
from .lookup import CharacterRecord, find_by_name, lookup_name
from .catalog import (
    list_categories, list_blocks, list_scripts,
    find_block, block_characters, category_characters,
)

__all__ = [
    'BASIC_LATIN', 'CharacterClassifier', 'Classification',
    'CharacterRecord', 'find_by_name', 'lookup_name',
    'list_categories', 'list_blocks', 'list_scripts',
    'find_block', 'block_characters', 'category_characters',
]
