"""
Utility functions for lexer fixture tests.
"""
import os
import json
import difflib
from pathlib import Path
from typing import Dict, Any, List, Tuple, Optional

from syntax import tokenize

from syntax_test_serializer import serialize_tokens, load_tokens_from_json


# Fixture file extension handled by the tests
SOURCE_EXTENSION = '.dart'


def get_test_fixtures_dir() -> Path:
    """
    Get the directory containing test fixtures.

    Returns:
        Path to the test fixtures directory
    """
    current_dir = Path(__file__).parent
    return current_dir / "fixtures"


def load_source_file(file_path: str) -> str:
    """
    Load a source code file.

    Args:
        file_path: Path to the source file

    Returns:
        The contents of the source file, with line endings preserved

    Raises:
        FileNotFoundError: If the source file cannot be found
        UnicodeDecodeError: If the file cannot be decoded as UTF-8
    """
    with open(file_path, 'r', encoding='utf-8', newline='') as f:
        return f.read()


def find_test_files() -> List[Tuple[str, str]]:
    """
    Find all test files (source files with corresponding JSON files).

    Returns:
        List of tuples containing (source_path, json_path)
    """
    fixtures_dir = get_test_fixtures_dir()
    test_files = []

    for root, _, files in os.walk(fixtures_dir):
        for file in sorted(files):
            if not file.lower().endswith(SOURCE_EXTENSION):
                continue

            file_path = os.path.join(root, file)
            json_path = file_path + '.json'
            if os.path.exists(json_path):
                test_files.append((file_path, json_path))

    return test_files


def compare_token_data(
    actual_data: Dict[str, Any],
    expected_data: Dict[str, Any]
) -> Tuple[bool, Optional[str]]:
    """
    Compare actual token data with expected token data.

    Args:
        actual_data: The actual token data dictionary
        expected_data: The expected token data dictionary

    Returns:
        Tuple of (is_match, diff_message)
    """
    actual_json = json.dumps(actual_data, indent=2, sort_keys=True)
    expected_json = json.dumps(expected_data, indent=2, sort_keys=True)

    if actual_json == expected_json:
        return True, None

    diff = difflib.unified_diff(
        expected_json.splitlines(keepends=True),
        actual_json.splitlines(keepends=True),
        fromfile='expected',
        tofile='actual'
    )

    return False, ''.join(diff)


def lex_and_compare(
    source_path: str,
    expected_json_path: str
) -> Tuple[bool, Optional[str]]:
    """
    Lex a source file and compare the result with an expected JSON file.

    Args:
        source_path: Path to the source file
        expected_json_path: Path to the expected JSON file

    Returns:
        Tuple of (is_match, diff_message)
    """
    try:
        source_text = load_source_file(source_path)

    except FileNotFoundError:
        return False, f"File not found: {source_path}"

    except UnicodeDecodeError:
        return False, f"Could not decode file as UTF-8: {source_path}"

    actual_data = serialize_tokens(tokenize(source_text), "DART", source_path)
    expected_data = load_tokens_from_json(expected_json_path)

    # Compare (excluding source_file path which may differ)
    actual_comparison = {k: v for k, v in actual_data.items() if k != 'source_file'}
    expected_comparison = {k: v for k, v in expected_data.items() if k != 'source_file'}

    return compare_token_data(actual_comparison, expected_comparison)
