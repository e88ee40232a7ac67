# algokit

A collection of classic algorithms and data structures written as plain,
dependency-free Python. It is meant for learning and for everyday use where a
small, readable implementation is enough.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.arrays` | `PrefixSums`, maximum subarray sum (brute force, prefix sums, Kadane), 0/1/2 sort, trapped rain water |
| `algokit.bits` | get/set/clear/update a bit, clear the lowest bits or a bit range, count set bits (two ways) |
| `algokit.searching` | `binary_search`, `lower_bound`, `upper_bound`, `count_occurrences`, `linear_search` |
| `algokit.strings` | `reverse_string`, `sort_strings` (longest first, then lexicographic), `is_palindrome` |
| `algokit.stacks` | `precedence`, `infix_to_postfix`, `has_redundant_parentheses`, `reverse_queue`, `reverse_queue_recursive` |
| `algokit.linked_list` | `LinkedList` (1-based `insert`/`delete`, `reverse`, `middle`, `is_palindrome`), `segregate_even_odd` |
| `algokit.heaps` | `heapify`, `build_max_heap`, `heap_sort`, `k_largest`, `MaxHeap` |
| `algokit.greedy` | `max_activities`, `fractional_knapsack`, `job_sequencing`, `optimal_merge_cost` |
| `algokit.mathematics` | `gcd`, `prime_sum_pair`, `cartesian_product`, `tower_of_hanoi` |
| `algokit.backtracking` | `hamiltonian_cycles`, `n_queens`, `rat_in_maze_paths` |
| `algokit.disjoint_set` | `UnionFind` with path compression and union by rank, `run_queries` |
| `algokit.graphs` | `Graph` (BFS/DFS), `WeightedGraph` (Dijkstra), `bellman_ford`, `floyd_warshall`, `articulation_points`, `greedy_coloring`, `is_bipartite`, `NegativeCycleError` |
| `algokit.mst` | `kruskal_weight`, `prim_weight` |
| `algokit.network_flow` | `ford_fulkerson` returning a `FlowResult` with `max_flow` and `augmenting_paths` |
| `algokit.binary_tree` | `BinaryNode`, BST insertion, in/pre/post/level-order and Morris traversal, `height`, `diameter`, tree builders, `largest_bst` |
| `algokit.avl` | self-balancing `AVLTree` |
| `algokit.generic_tree` | n-ary `TreeNode`, `build_generic_tree`, `describe`, `diameter`, `path_to_node`, `node_distance` |

## Examples

```python
from algokit.arrays import max_subarray_sum_kadane, trapped_water
from algokit.heaps import heap_sort
from algokit.stacks import infix_to_postfix

max_subarray_sum_kadane([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])        # 6
heap_sort([5, 4, 3, 6, 1, 2, 7])                            # [1, 2, 3, 4, 5, 6, 7]
infix_to_postfix("a^(b*c-d/(e+f))")                         # "abc*def+/-^"
```

Kadane's version restarts its running sum at zero, so for an input of only
negative numbers it returns 0; the brute-force and prefix-sum versions return
the largest single element.

```python
from algokit.avl import AVLTree

tree = AVLTree([9, 5, 10, 0, 6, 11, -1, 1, 2])
tree.preorder()       # [9, 1, 0, -1, 5, 2, 6, 10, 11]
tree.delete(10)
tree.preorder()       # [1, 0, -1, 9, 5, 2, 6, 11]
6 in tree             # True
```

```python
from algokit.disjoint_set import UnionFind

sets = UnionFind(5)
sets.union(0, 1)
sets.same_set(0, 1)   # True
sets.set_count()      # 4
```

```python
from algokit.graphs import Graph

g = Graph()
g.add_edge(0, 1)
g.add_edge(1, 2)
g.add_edge(2, 3)
g.bfs(0)              # [0, 1, 2, 3]
```

```python
from algokit.network_flow import ford_fulkerson

capacity = [
    [0, 4, 0, 3, 0, 0],
    [0, 0, 4, 0, 0, 0],
    [0, 0, 0, 3, 0, 2],
    [0, 0, 0, 0, 6, 0],
    [0, 0, 0, 0, 0, 6],
    [0, 0, 0, 0, 0, 0],
]
result = ford_fulkerson(capacity, 0, 5)
result.max_flow           # 7
result.augmenting_paths   # each path listed from source to sink
```

Functions that take sequences return new values and leave their input
untouched, except where a docstring says otherwise (`heapify` and
`reverse_queue_recursive` work in place, and `morris_inorder` relinks the tree
while it runs and restores it). Bad input is reported by raising exceptions,
for example `ValueError`, `IndexError`, or `NegativeCycleError` from
`bellman_ford`. In `graphs` and `network_flow`, `math.inf` stands for a
missing edge or an unreachable vertex.

## What it does not do

- It is a library only: there are no command-line programs and nothing reads
  from standard input.
- Apart from `heap_sort` and the 0/1/2 sort in `algokit.arrays`, it has no
  general sorting routines and no inversion counting.
- It has no dynamic-programming routines such as 0/1 knapsack, subset sum,
  equal-sum partition, longest common subsequence or travelling salesperson.