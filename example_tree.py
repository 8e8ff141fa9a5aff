import sympy as sy

from recseq.stream import fmap, take
from recseq.walks import build_tree, expression_postorder, postorder, inorder

variables = sy.symbols


if __name__ == "__main__":
    tree = build_tree([5, 3, 8, 1, 4, 7, 9])

    print('in-order:  ', list(inorder(tree)))
    print('post-order:', list(postorder(tree)))
    print('squares of the first three:', list(fmap(lambda v: v * v, take(3, postorder(tree)))))

    x, y = variables('x, y')
    for subexpression in expression_postorder(sy.sin(x) * y + 2):
        print(subexpression)
