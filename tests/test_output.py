import pytest

from unipipe.output import Output, OutputKind, UniPipe


class InnerPipe(UniPipe):
    def next(self, input):
        if input is None:
            return Output.next()
        return {
            0: Output.done(),
            1: Output.one(1),
            2: Output.many([2, 2]),
            3: Output.done_with_one(3),
            4: Output.done_with_many([4, 4]),
        }[input]


class OuterPipe(UniPipe):
    def __init__(self):
        self.inner = InnerPipe()

    def next(self, input):
        return self.inner.next(input).map(lambda value: -value)


class SlicePipe(UniPipe):
    def __init__(self, size):
        self.size = size
        self.pending = []

    def next(self, input):
        if input is None:
            taken, self.pending = self.pending, []
            return Output.one(taken)
        self.pending.append(input)
        if len(self.pending) >= self.size:
            taken, self.pending = self.pending, []
            return Output.one(taken)
        return Output.next()


class ComposePipe(UniPipe):
    def __init__(self):
        self.first = InnerPipe()
        self.second = SlicePipe(2)

    def next(self, input):
        return self.first.next(input).pipe(self.second)


class Recorder(UniPipe):
    def __init__(self):
        self.seen = []

    def next(self, input):
        self.seen.append(input)
        return input


def test_constructors_kinds_and_values():
    assert Output.next() == Output(OutputKind.NEXT, ())
    assert Output.one(5) == Output(OutputKind.ONE, (5,))
    assert Output.many([1, 2]) == Output(OutputKind.MANY, (1, 2))
    assert Output.done() == Output(OutputKind.DONE, ())
    assert Output.done_with_one(7) == Output(OutputKind.DONE_WITH_ONE, (7,))
    assert Output.done_with_many(iter([3, 4])) == Output(
        OutputKind.DONE_WITH_MANY, (3, 4)
    )


@pytest.mark.parametrize(
    "output, expected",
    [
        (Output.next(), False),
        (Output.one(1), False),
        (Output.many([1]), False),
        (Output.done(), True),
        (Output.done_with_one(1), True),
        (Output.done_with_many([1]), True),
    ],
)
def test_is_done(output, expected):
    assert output.is_done() is expected


def test_coerce():
    assert Output.coerce(None) == Output.next()
    assert Output.coerce(3) == Output.one(3)
    assert Output.coerce([1, 2]) == Output.one([1, 2])
    already = Output.done_with_many([1])
    assert Output.coerce(already) is already


def test_iter():
    assert list(Output.next()) == []
    assert list(Output.one(1)) == [1]
    assert list(Output.many([1, 2, 3])) == [1, 2, 3]
    assert list(Output.done()) == []
    assert list(Output.done_with_one(4)) == [4]
    assert list(Output.done_with_many([5, 6])) == [5, 6]


def test_map_keeps_kind():
    assert Output.many([1, 2]).map(lambda v: v * 10) == Output.many([10, 20])
    assert Output.done_with_one(2).map(str) == Output.done_with_one("2")
    assert Output.done().map(str) == Output.done()
    assert Output.next().map(str) == Output.next()


def test_finished():
    assert Output.next().finished() == Output.done()
    assert Output.one(1).finished() == Output.done_with_one(1)
    assert Output.many([1, 2]).finished() == Output.done_with_many([1, 2])
    assert Output.done_with_one(1).finished() == Output.done_with_one(1)
    assert Output.done().finished() == Output.done()


def test_unipipe_is_abstract():
    with pytest.raises(TypeError):
        UniPipe()


def test_compose_1_map_steps():
    pipe = OuterPipe()
    assert pipe.next(1) == Output.one(-1)
    assert pipe.next(2) == Output.many([-2, -2])
    assert pipe.next(None) == Output.next()

    pipe = OuterPipe()
    assert pipe.next(1) == Output.one(-1)
    assert pipe.next(3) == Output.done_with_one(-3)

    pipe = OuterPipe()
    assert pipe.next(2) == Output.many([-2, -2])
    assert pipe.next(4) == Output.done_with_many([-4, -4])

    pipe = OuterPipe()
    assert pipe.next(1) == Output.one(-1)
    assert pipe.next(2) == Output.many([-2, -2])
    assert pipe.next(0) == Output.done()


def test_compose_2_ending_with_one():
    pipe = ComposePipe()
    assert pipe.next(1) == Output.next()
    assert pipe.next(2) == Output.many([[1, 2]])
    assert pipe.next(3) == Output.done_with_one([2, 3])


def test_compose_2_ending_with_many():
    pipe = ComposePipe()
    assert pipe.next(1) == Output.next()
    assert pipe.next(2) == Output.many([[1, 2]])
    assert pipe.next(4) == Output.done_with_many([[2, 4], [4]])


def test_compose_2_ending_with_done():
    pipe = ComposePipe()
    assert pipe.next(1) == Output.next()
    assert pipe.next(2) == Output.many([[1, 2]])
    assert pipe.next(0) == Output.done_with_one([2])


def test_pipe_next_does_not_call_inner():
    recorder = Recorder()
    assert Output.next().pipe(recorder) == Output.next()
    assert recorder.seen == []


def test_pipe_done_with_one_does_not_send_end():
    recorder = Recorder()
    assert Output.done_with_one(5).pipe(recorder) == Output.done_with_one(5)
    assert recorder.seen == [5]


def test_pipe_done_sends_end():
    recorder = Recorder()
    assert Output.done().pipe(recorder) == Output.done()
    assert recorder.seen == [None]


def test_pipe_done_with_many_sends_end_after_values():
    recorder = Recorder()
    assert Output.done_with_many([1, 2]).pipe(recorder) == Output.done_with_many(
        [1, 2]
    )
    assert recorder.seen == [1, 2, None]


def test_pipe_many_stops_when_inner_is_done():
    class StopAtTwo(UniPipe):
        def __init__(self):
            self.seen = []

        def next(self, input):
            self.seen.append(input)
            if input == 2:
                return Output.done_with_one(input)
            return input

    inner = StopAtTwo()
    assert Output.many([1, 2, 3]).pipe(inner) == Output.done_with_many([1, 2])
    assert inner.seen == [1, 2]