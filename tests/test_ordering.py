import random
import threading

import pytest

from services import ordering, persistence
from services.errors import NotFoundError, ReorderError, StoreError, ValidationError


def _seed(names, table='speakers', **extra):
    return {name: ordering.append(table, {'name': name, **extra})['id'] for name in names}


def _order(table='speakers', group_key=None):
    return [r['name'] for r in ordering.list_group(table, group_key)]


def _indexes(table='speakers', group_key=None):
    return [r['order_index'] for r in ordering.list_group(table, group_key)]


def test_append_assigns_next_index(data_dir):
    ids = _seed(['A', 'B', 'C'])
    rows = {r['id']: r['order_index'] for r in persistence.query('speakers')}
    assert [rows[ids[n]] for n in 'ABC'] == [0, 1, 2]


def test_move_backward_shifts_siblings_up(data_dir):
    ids = _seed(['A', 'B', 'C', 'D'])
    written = ordering.reorder('speakers', ids['C'], 0)
    assert _order() == ['C', 'A', 'B', 'D']
    assert _indexes() == [0, 1, 2, 3]
    # Siblings are shifted from the top down, the moved row is written last
    assert written == [ids['B'], ids['A'], ids['C']]


def test_move_forward_shifts_siblings_down(data_dir):
    ids = _seed(['A', 'B', 'C', 'D'])
    written = ordering.reorder('speakers', ids['A'], 3)
    assert _order() == ['B', 'C', 'D', 'A']
    assert _indexes() == [0, 1, 2, 3]
    assert written == [ids['B'], ids['C'], ids['D'], ids['A']]


def test_move_to_same_index_is_noop(data_dir):
    ids = _seed(['A', 'B', 'C'])
    before = persistence.query('speakers', order_by='order_index')
    assert ordering.reorder('speakers', ids['B'], 1) == []
    assert persistence.query('speakers', order_by='order_index') == before


def test_repeated_move_is_idempotent(data_dir):
    ids = _seed(['A', 'B', 'C', 'D'])
    ordering.reorder('speakers', ids['D'], 1)
    first = _order()
    assert ordering.reorder('speakers', ids['D'], 1) == []
    assert _order() == first == ['A', 'D', 'B', 'C']


def test_move_does_not_touch_rows_outside_range(data_dir):
    ids = _seed(['A', 'B', 'C', 'D', 'E'])
    written = ordering.reorder('speakers', ids['B'], 3)
    assert ids['A'] not in written and ids['E'] not in written
    assert _order() == ['A', 'C', 'D', 'B', 'E']


@pytest.mark.parametrize('bad_index', [-1, 4, 10])
def test_out_of_range_index_rejected(data_dir, bad_index):
    ids = _seed(['A', 'B', 'C', 'D'])
    with pytest.raises(ValidationError):
        ordering.reorder('speakers', ids['A'], bad_index)
    assert _order() == ['A', 'B', 'C', 'D']


def test_non_integer_index_rejected(data_dir):
    ids = _seed(['A', 'B'])
    with pytest.raises(ValidationError):
        ordering.reorder('speakers', ids['A'], '1')
    with pytest.raises(ValidationError):
        ordering.reorder('speakers', ids['A'], True)


def test_missing_row_raises_not_found(data_dir):
    _seed(['A'])
    with pytest.raises(NotFoundError):
        ordering.reorder('speakers', 'spk_missing', 0)


def test_partner_groups_are_independent(data_dir):
    gold = _seed(['G1', 'G2', 'G3'], table='partners', type='gold')
    _seed(['S1', 'S2'], table='partners', type='silver')
    ordering.reorder('partners', gold['G3'], 0, 'gold')
    assert _order('partners', 'gold') == ['G3', 'G1', 'G2']
    assert _order('partners', 'silver') == ['S1', 'S2']
    assert _indexes('partners', 'silver') == [0, 1]


def test_partner_move_requires_matching_group(data_dir):
    gold = _seed(['G1', 'G2'], table='partners', type='gold')
    _seed(['S1'], table='partners', type='silver')
    with pytest.raises(ValidationError):
        ordering.reorder('partners', gold['G1'], 0, 'silver')
    with pytest.raises(ValidationError):
        ordering.reorder('partners', gold['G1'], 1)


def test_failed_write_reports_committed_rows(data_dir, monkeypatch):
    ids = _seed(['A', 'B', 'C', 'D'])
    real_update = persistence.update
    calls = []

    def flaky_update(table, row_id, partial_row):
        calls.append(row_id)
        if len(calls) == 2:
            raise StoreError("disk full")
        return real_update(table, row_id, partial_row)

    monkeypatch.setattr(persistence, 'update', flaky_update)
    with pytest.raises(ReorderError) as exc_info:
        ordering.reorder('speakers', ids['A'], 3)

    err = exc_info.value
    assert err.failed_item_id == ids['C']
    assert err.committed_ids == [ids['B']]
    assert 'disk full' in str(err)

    monkeypatch.setattr(persistence, 'update', real_update)
    # B was persisted at 0 before C failed; A and C keep their old values
    by_id = {r['id']: r['order_index'] for r in persistence.query('speakers')}
    assert by_id == {ids['A']: 0, ids['B']: 0, ids['C']: 2, ids['D']: 3}
    report = ordering.verify_sequence('speakers')
    assert not report.ok
    assert report.duplicates == [0]
    assert report.missing == [1]


def test_failed_write_of_moved_row(data_dir, monkeypatch):
    ids = _seed(['A', 'B'])
    real_update = persistence.update

    def failing_for_a(table, row_id, partial_row):
        if row_id == ids['A']:
            raise StoreError("timeout")
        return real_update(table, row_id, partial_row)

    monkeypatch.setattr(persistence, 'update', failing_for_a)
    with pytest.raises(ReorderError) as exc_info:
        ordering.reorder('speakers', ids['A'], 1)
    assert exc_info.value.failed_item_id == ids['A']
    assert exc_info.value.committed_ids == [ids['B']]


def test_repair_restores_contiguous_sequence(data_dir):
    ids = _seed(['A', 'B', 'C', 'D'])
    persistence.update('speakers', ids['B'], {'order_index': 0})
    persistence.update('speakers', ids['D'], {'order_index': 7})
    assert not ordering.verify_sequence('speakers').ok

    changed = ordering.repair_sequence('speakers')
    assert changed > 0
    assert ordering.verify_sequence('speakers').ok
    assert _indexes() == [0, 1, 2, 3]
    assert _order()[-2:] == ['C', 'D']
    assert ordering.repair_sequence('speakers') == 0


def test_soft_delete_compacts_group(data_dir):
    ids = _seed(['A', 'B', 'C', 'D'])
    ordering.soft_delete('speakers', ids['B'])
    assert _order() == ['A', 'C', 'D']
    assert _indexes() == [0, 1, 2]
    deleted = persistence.get('speakers', ids['B'], include_deleted=True)
    assert deleted['deleted_at']
    assert ordering.next_order_index('speakers') == 3


def test_move_to_group_appends_and_closes_gap(data_dir):
    gold = _seed(['G1', 'G2', 'G3'], table='partners', type='gold')
    _seed(['S1'], table='partners', type='silver')
    moved = ordering.move_to_group('partners', gold['G1'], 'silver', {'name': 'G1*'})
    assert moved['type'] == 'silver'
    assert moved['order_index'] == 1
    assert _order('partners', 'silver') == ['S1', 'G1*']
    assert _order('partners', 'gold') == ['G2', 'G3']
    assert _indexes('partners', 'gold') == [0, 1]


def test_unordered_table_rejected(data_dir):
    with pytest.raises(ValidationError):
        ordering.group_filters('faq')


@pytest.mark.parametrize('size,old,new', [
    (size, old, new) for size in range(1, 6) for old in range(size) for new in range(size)
])
def test_every_move_keeps_sequence_contiguous(data_dir, size, old, new):
    names = [chr(ord('A') + i) for i in range(size)]
    ids = _seed(names)
    ordering.reorder('speakers', ids[names[old]], new)

    expected = names[:old] + names[old + 1:]
    expected.insert(new, names[old])
    assert _order() == expected
    assert _indexes() == list(range(size))


def _run_before_first_get(monkeypatch, action):
    """Run ``action`` right after the first row read, before any lock is taken."""
    real_get = persistence.get
    state = {'done': False}

    def get(table, row_id, include_deleted=False):
        row = real_get(table, row_id, include_deleted)
        if not state['done']:
            state['done'] = True
            action()
        return row

    monkeypatch.setattr(persistence, 'get', get)


def test_second_delete_of_same_row_is_rejected(data_dir, monkeypatch):
    ids = _seed(['A', 'B', 'C', 'D'])
    _run_before_first_get(monkeypatch, lambda: ordering.soft_delete('speakers', ids['B']))

    with pytest.raises(NotFoundError):
        ordering.soft_delete('speakers', ids['B'])
    assert _order() == ['A', 'C', 'D']
    assert _indexes() == [0, 1, 2]


def test_group_move_uses_index_read_under_lock(data_dir, monkeypatch):
    gold = _seed(['G1', 'G2', 'G3'], table='partners', type='gold')
    _run_before_first_get(monkeypatch, lambda: ordering.reorder('partners', gold['G1'], 2, 'gold'))

    moved = ordering.move_to_group('partners', gold['G1'], 'silver')
    assert moved['order_index'] == 0
    assert _order('partners', 'gold') == ['G2', 'G3']
    assert _indexes('partners', 'gold') == [0, 1]


def _run_threads(targets):
    errors = []

    def wrap(fn):
        def run():
            try:
                fn()
            except Exception as e:
                errors.append(e)
        return run

    threads = [threading.Thread(target=wrap(fn)) for fn in targets]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return errors


def test_concurrent_reorders_keep_sequence_contiguous(data_dir):
    ids = list(_seed(['A', 'B', 'C', 'D', 'E', 'F']).values())

    def mover(seed):
        rng = random.Random(seed)

        def run():
            for _ in range(8):
                ordering.reorder('speakers', rng.choice(ids), rng.randrange(len(ids)))
        return run

    errors = _run_threads([mover(seed) for seed in range(6)])
    assert errors == []
    assert _indexes() == [0, 1, 2, 3, 4, 5]
    assert sorted(_order()) == ['A', 'B', 'C', 'D', 'E', 'F']


def test_concurrent_deletes_and_reorders(data_dir):
    ids = _seed(['A', 'B', 'C', 'D', 'E', 'F'])
    barrier = threading.Barrier(4)

    def delete(name):
        def run():
            barrier.wait()
            ordering.soft_delete('speakers', ids[name])
        return run

    def move_a():
        barrier.wait()
        ordering.reorder('speakers', ids['A'], 1)

    # B is deleted twice: exactly one of those calls must fail
    errors = _run_threads([delete('B'), delete('B'), delete('E'), move_a])
    assert len(errors) == 1
    assert isinstance(errors[0], NotFoundError)
    assert sorted(_order()) == ['A', 'C', 'D', 'F']
    assert _indexes() == [0, 1, 2, 3]
    assert ordering.verify_sequence('speakers').ok
