"""Edge-list graphs, union-find and Karger's randomised minimum cut."""