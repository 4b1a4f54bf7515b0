import bisect


class TRuleRegistry:
    # Rules are kept sorted by (priority desc, registration order asc), so
    # resolution is the first rule whose matcher accepts the node.
    __slots__ = ["rules", "keys", "counter"]

    def __init__(self):
        self.rules = []
        self.keys = []
        self.counter = 0

    def __len__(self): return len(self.rules)

    def __iter__(self): return iter(self.rules)

    def Register(self, rule):
        key = (-rule.priority, self.counter)
        self.counter += 1
        i = bisect.bisect_right(self.keys, key)
        self.keys.insert(i, key)
        self.rules.insert(i, rule)
        return rule

    def Resolve(self, node):
        path = node.path
        for rule in self.rules:
            if rule.matcher.Matches(node, path): return rule
        return None

    def ToJson(self):
        return [rule.ToJson() for rule in self.rules]
