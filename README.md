# seqstrings

Classic string algorithms for DNA sequences over the alphabet `A`, `C`, `G`, `T`. Suffix-based structures also use the terminator `$`.

The package provides:

- **Tries** (`seqstrings.trie`). Build a trie from a set of patterns and list its edges. Find the positions in a text where patterns occur.
- **Knuth-Morris-Pratt** (`seqstrings.kmp`). Compute the prefix function and find all occurrences of a pattern.
- **Burrows-Wheeler transform** (`seqstrings.bwt`). Compute the forward and inverse transform. Count pattern occurrences from the transformed text alone with `BWTIndex`.
- **Suffix arrays** (`seqstrings.suffix_array`). Build one naively or by prefix doubling, and locate patterns by binary search.
- **Suffix trees** (`seqstrings.suffix_tree`, `seqstrings.suffix_tree_from_array`, `seqstrings.non_shared`). List the edge labels of a suffix tree. Build a tree from a suffix array and LCP array. Find the shortest substring of one string that does not occur in another.

It needs nothing beyond the Python standard library and supports Python 3.10 and later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library usage

```python
from seqstrings.trie import match_patterns, match_patterns_extended
from seqstrings.kmp import find_pattern
from seqstrings.bwt import bwt, inverse_bwt, BWTIndex
from seqstrings.suffix_array import build_suffix_array
from seqstrings.non_shared import shortest_non_shared_substring

# Positions where reading along the trie ends at a leaf
match_patterns("AAA", ["AA"])                           # [0, 1]

# Positions where any pattern starts, prefixes of other patterns included
match_patterns_extended("ACATA", ["AT", "A", "AG"])     # [0, 2, 4]

# Knuth-Morris-Pratt search
find_pattern("A", "AAA")                                # [0, 1, 2]

# Burrows-Wheeler transform and its inverse
bwt("ACACACAC$")                                        # "CCCC$AAAA"
inverse_bwt("CCCC$AAAA")                                # "ACACACAC$"

# Count occurrences using only the transformed text
index = BWTIndex("AGGGAA$")
index.count("GA")                                       # 3

# Suffix array by prefix doubling
build_suffix_array("GAC$")                              # [3, 1, 2, 0]

# Shortest substring of the first string absent from the second
shortest_non_shared_substring("A", "T")                 # "A"
```

Other functions:

- `seqstrings.trie.build_trie` returns a trie as a list of `{symbol: child}` mappings. Node 0 is the root.
- `seqstrings.trie.trie_edges` lists its edges as `(parent, child, symbol)` triples.
- `seqstrings.kmp.prefix_function` computes the prefix function of a sequence.
- `seqstrings.bwt.count_occurrences` counts several patterns against one transformed text.
- `seqstrings.suffix_array.naive_suffix_array` builds a suffix array by sorting suffixes.
- `seqstrings.suffix_array.find_occurrences` finds a pattern using a prebuilt suffix array.
- `seqstrings.suffix_array.matching_positions` appends `$` to a text. It returns the sorted positions where any of the given patterns starts.
- `seqstrings.suffix_tree.suffix_tree_edges` returns the edge labels of a suffix tree in depth-first order.
- `seqstrings.suffix_tree_from_array.suffix_tree_from_suffix_array` builds a tree. The tree is a mapping from node ID to a list of `Edge(node, start, end)`.
- `seqstrings.suffix_tree_from_array.iter_edges` walks that tree depth-first from the root.

Invalid input raises `ValueError`. This includes symbols outside the supported alphabet, an empty text or pattern where one is required, and arrays of the wrong length.

## Command line

Installing the package adds a `seqstrings` command. It takes one subcommand and reads whitespace-separated input from standard input.

| Subcommand | Input | Output |
| --- | --- | --- |
| `trie` | number of patterns, then the patterns | one `parent->child:symbol` line per edge |
| `kmp` | pattern, then text | start positions, space separated |
| `bwmatching` | transformed text, number of patterns, then the patterns | occurrence count of each pattern, space separated |
| `suffix-tree-from-array` | text, its suffix array, then its LCP array | the text, then one `start end` line per edge |

For example:

```
echo "2 AT AG" | seqstrings trie
```

On malformed input the command prints a message to standard error and exits with status 1.

## Limits

The command line covers only the four subcommands above. The other algorithms are available only as library functions.