# filename: huffman_core.py

import heapq
from collections import Counter

from huffman_errors import EmptyInputError


class Leaf:
    __slots__ = ("symbol", "weight")

    def __init__(self, symbol, weight):
        self.symbol = symbol
        self.weight = weight

    def __lt__(self, other):
        return self.weight < other.weight

    def __repr__(self):
        return f"Leaf({self.symbol!r}, {self.weight})"


class Internal:
    __slots__ = ("left", "right", "weight")

    def __init__(self, left, right):
        self.left = left
        self.right = right
        self.weight = left.weight + right.weight

    def __lt__(self, other):
        return self.weight < other.weight

    def __repr__(self):
        return f"Internal({self.weight})"


class HuffmanLogic:
    """Stateless building blocks: frequencies -> tree -> code table."""

    def count_frequencies(self, data):
        # Frequency analysis of the input byte data
        return Counter(data)

    def build_tree(self, freqs):
        if not freqs:
            raise EmptyInputError()

        # Build a priority queue for leaf nodes
        priority_queue = [Leaf(symbol, weight) for symbol, weight in freqs.items()]
        heapq.heapify(priority_queue)

        # Iteratively merge nodes to form the binary tree
        while len(priority_queue) > 1:
            left = heapq.heappop(priority_queue)
            right = heapq.heappop(priority_queue)
            heapq.heappush(priority_queue, Internal(left, right))

        return priority_queue[0]

    def generate_codes(self, root):
        # A lone leaf still needs a one-bit code or nothing could be decoded
        if isinstance(root, Leaf):
            return {root.symbol: "0"}

        codes = {}
        stack = [(root, "")]
        while stack:
            node, code = stack.pop()
            if isinstance(node, Leaf):
                codes[node.symbol] = code
                continue
            # right is pushed first so the left subtree is visited first
            stack.append((node.right, code + "1"))
            stack.append((node.left, code + "0"))
        return codes

    def tree_depth(self, root):
        if isinstance(root, Leaf):
            return 1

        depth = 0
        stack = [(root, 0)]
        while stack:
            node, level = stack.pop()
            if isinstance(node, Leaf):
                depth = max(depth, level)
            else:
                stack.append((node.left, level + 1))
                stack.append((node.right, level + 1))
        return depth
