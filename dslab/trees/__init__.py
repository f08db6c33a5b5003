"""Binary search trees, AVL trees, hash tables, number files and their comparison."""