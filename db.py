import logging
from threading import Lock

import pygtrie

from avltree import AVLTree, AVLMap, Outcome

logger = logging.getLogger(__name__)


def make_lookup_key(partition_key, sort_key):
    return partition_key + ":" + sort_key


class Db():
    """Items addressed by partition key and sort key.

    Items are stored under the (partition key, sort key) pair. Each
    partition keeps its sort keys in an AVLMap for ordered and range
    queries and in its own CharTrie for prefix queries. The joined
    "partition:sort" lookup key is only used for display.
    """

    def __init__(self):
        self.db = {}
        self.sort_index = {}
        self.between_index = {}
        self.partition_index = AVLTree()
        self.lock = Lock()

    def store(self, partition_key, sort_key, item) -> Outcome:
        with self.lock:
            self.db[(partition_key, sort_key)] = item
            if partition_key not in self.between_index:
                self.between_index[partition_key] = AVLMap()
                self.sort_index[partition_key] = pygtrie.CharTrie()
                self.partition_index.insert(partition_key)
            self.sort_index[partition_key][sort_key] = sort_key
            outcome = self.between_index[partition_key].insert(sort_key, make_lookup_key(partition_key, sort_key))
        logger.info("%s %s %s", outcome.value, partition_key, sort_key)
        return outcome

    def get(self, partition_key, sort_key):
        return self.db[(partition_key, sort_key)]

    def remove(self, partition_key, sort_key) -> Outcome:
        with self.lock:
            tree = self.between_index.get(partition_key)
            if tree is None or tree.delete(sort_key) is Outcome.NOT_FOUND:
                return Outcome.NOT_FOUND
            del self.db[(partition_key, sort_key)]
            del self.sort_index[partition_key][sort_key]
            if tree.is_empty():
                del self.between_index[partition_key]
                del self.sort_index[partition_key]
                self.partition_index.delete(partition_key)
        logger.info("removed %s %s", partition_key, sort_key)
        return Outcome.REMOVED

    def partitions(self):
        with self.lock:
            return list(self.partition_index.traverse())

    def stats(self):
        with self.lock:
            return {partition_key: {"size": len(tree), "height": tree.height()}
                    for partition_key, tree in self.between_index.items()}

    def _walk(self, partition_key, match):
        with self.lock:
            tree = self.between_index.get(partition_key)
            if tree is None:
                return []
            return [(sort_key, lookup_key, self.db[(partition_key, sort_key)])
                    for sort_key, lookup_key in tree.items() if match(sort_key)]

    def query_begins(self, partition_key, query, sortmode):
        with self.lock:
            trie = self.sort_index.get(partition_key)
            if trie is None or not trie.has_node(query):
                return []
            results = [(sort_key, make_lookup_key(partition_key, sort_key), self.db[(partition_key, sort_key)])
                       for sort_key in trie.values(prefix=query)]
        return sorted(results, key=lambda x: x[0], reverse=sortmode == "desc")

    def query_between(self, partition_key, from_query, to_query, sortmode):
        items = self._walk(partition_key, lambda sort_key: from_query <= sort_key <= to_query)
        return sorted(items, key=lambda x: x[0], reverse=sortmode == "desc")

    def query_before_than(self, partition_key, target_sort_key, sortmode):
        items = self._walk(partition_key, lambda sort_key: sort_key < target_sort_key)
        return sorted(items, key=lambda x: x[0], reverse=sortmode == "desc")

    def query_greater_than(self, partition_key, target_sort_key, sortmode):
        items = self._walk(partition_key, lambda sort_key: sort_key > target_sort_key)
        return sorted(items, key=lambda x: x[0], reverse=sortmode == "desc")
