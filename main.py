from heapy import IndexedHeap, get_topk


class Job:
    def __init__(self, name, priority):
        self.name = name
        self.priority = priority

    def __lt__(self, other):
        return self.priority < other.priority


jobs = [
    Job("low", 10.5),
    Job("very_low", 3.2),
    Job("medium", 15.0),
    Job("low_med", 7.8),
    Job("high", 20.1),
    Job("lowest", 1.5),
]

# Bulk load, then a single O(n) fix-up
print("Creating indexed heap...")
heap = IndexedHeap(len(jobs))
handles = {job.name: heap.fast_push(job) for job in jobs}
heap.reheapify()

print(f"Heap size: {len(heap)}")
print(f"Is full: {heap.is_full()}")
print(f"Top job: {heap.peek().name}")
print(f"Top 3: {[job.name for job in get_topk(heap, 3)]}")

# Raise a priority in place and restore the order through its handle
jobs[1].priority = 99.0
heap.update(handles["very_low"])
print(f"Top job after update: {heap.peek().name}")

while heap:
    job = heap.pop()
    print(f"{job.name}: {job.priority}")
