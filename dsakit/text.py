"""String exercises: removal, anagrams, encoding, reversal and palindromes."""

from collections import Counter
from itertools import groupby


def remove_occurrences(s, part):
    """Repeatedly remove the leftmost occurrence of part until none is left."""
    if not part:
        raise ValueError("part must not be empty")
    while (index := s.find(part)) != -1:
        s = s[:index] + s[index + len(part):]
    return s


def is_anagram(first, second):
    """Return True if both strings hold the same characters with the same counts."""
    return Counter(first) == Counter(second)


def defang_ip_address(address):
    """Replace every '.' with '[.]'."""
    return address.replace(".", "[.]")


def num_jewels_in_stones(jewels, stones):
    """Count the stones whose character is one of the jewels."""
    jewel_set = set(jewels)
    return sum(1 for stone in stones if stone in jewel_set)


def restore_string(s, indices):
    """Place s[i] at position indices[i] and return the resulting string."""
    result = [""] * len(s)
    for ch, index in zip(s, indices):
        result[index] = ch
    return "".join(result)


def reverse_chars(chars):
    """Reverse a mutable sequence of characters in place and return it."""
    chars.reverse()
    return chars


def reverse_words(s):
    """Return the whitespace-separated words of s in reverse order, single-spaced."""
    return " ".join(reversed(s.split()))


def run_length_encode(text):
    """Encode runs of equal characters as the character followed by its count."""
    return "".join(f"{ch}{sum(1 for _ in run)}" for ch, run in groupby(text))


def to_lower_case(s):
    """Return s in lower case."""
    return s.lower()


def array_strings_are_equal(word1, word2):
    """Return True if both lists of strings concatenate to the same string."""
    return "".join(word1) == "".join(word2)


def is_palindrome(text):
    """Return True if text reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [ch.lower() for ch in text if ch.isalnum()]
    return cleaned == cleaned[::-1]