SPLIT_RATIO = 0.8
RANDOM_STATE = 1

NUM_NEIGHBORS = 3
KNN_ALGORITHM = "linear"  # "linear" or "kdtree"
KDTREE_LEAF_SIZE = 40

# plain CART defaults
TREE_PARAMS = {
    "criterion": "gini",
    "max_depth": None,
    "min_samples_split": 2,
    "min_samples_leaf": 1,
    "random_state": RANDOM_STATE,
}
