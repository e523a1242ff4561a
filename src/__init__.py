from src.dheap.dheap import DHeap, tree_height
from src.dheap.commands import Command, HeapController, Result, Snapshot
from src.dheap.topk import get_topk
