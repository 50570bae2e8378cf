from collections import namedtuple
from functools import cmp_to_key
import suite
from dgen import from_schema
from ordinq import (
    Comparator, as_comparator, natural, reverse_order, from_function, comparing,
    case_insensitive, lexicographical, empties_first
)

test = suite.test
assert_that = suite.assert_that

Person = namedtuple('Person', ['name', 'age', 'city'])

sample_people = [
    Person('alice', 25, 'nyc'),
    Person('bob', 30, 'la'),
    Person('charlie', 25, 'nyc'),
    Person('diana', 35, 'chicago'),
    Person('eve', 28, 'la')
]

person_schema = {
    'name': 'first_name',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'city': {'_qen_provider': 'choice', 'from': ['nyc', 'la', 'chicago']}
}


class OnlyLessThan:
    """defines __lt__ and nothing else, which is all python's sort needs"""

    def __init__(self, value):
        self.value = value

    def __lt__(self, other):
        return self.value < other.value


# natural() tests

@test("natural compares with the values' own operators")
def test_natural_compare():
    comparator = natural()
    assert_that(comparator(1, 2) == -1, "1 sorts before 2")
    assert_that(comparator(2, 1) == 1, "2 sorts after 1")
    assert_that(comparator(2, 2) == 0, "2 ties with 2")
    assert_that(comparator.compare("b", "a") == 1, "compare() and call agree")


@test("natural needs only __lt__")
def test_natural_only_less_than():
    low, high = OnlyLessThan(1), OnlyLessThan(2)
    suite.assert_ordered_by(natural(), low, high)


@test("natural is a shared, stateless comparator")
def test_natural_shared():
    assert_that(natural() is natural(), "natural() should return the same instance")
    assert_that(as_comparator(None) is natural(), "none means natural order")
    assert_that(repr(natural()) == "natural()", f"unexpected repr: {natural()!r}")


# immutability

@test("shared comparators cannot be altered by callers")
def test_comparators_are_read_only():
    shared = natural()
    suite.assert_raises(AttributeError, lambda: setattr(shared, "check", None), "check should be read-only")
    suite.assert_raises(AttributeError, lambda: setattr(shared, "pick", None), "pick should be read-only")
    suite.assert_raises(AttributeError, lambda: setattr(comparing(len), "label", "x"), "new attributes are refused")
    assert_that(natural().check.in_order([1, 2]), "natural() should still work after the attempts")
    assert_that(natural().pick.min(2, 1) == 1, "natural() should still work after the attempts")


# reversal tests

@test("reversed flips the ordering")
def test_reversed():
    suite.assert_ordered_by(natural().reversed(), 3, 2, 1)
    suite.assert_ordered_by(reverse_order(comparing(len)), "abc", "ab", "a")


@test("reversing twice gives back the original comparator")
def test_double_reverse():
    by_length = comparing(len)
    assert_that(by_length.reversed().reversed() is by_length, "double reversal should unwrap")
    assert_that(reverse_order(reverse_order()) is natural(), "double reversal of natural order")


# from_function() / as_comparator() tests

@test("from_function wraps plain cmp functions")
def test_from_function():
    def by_age(a, b):
        return a.age - b.age

    comparator = from_function(by_age)
    assert_that(isinstance(comparator, Comparator), "should produce a comparator")
    assert_that(comparator(sample_people[0], sample_people[1]) == -5, "result passes through")
    assert_that(repr(comparator).endswith("by_age)"), f"repr should name the function: {comparator!r}")
    assert_that(from_function(comparator) is comparator, "a comparator is returned unchanged")


@test("as_comparator rejects values that cannot compare")
def test_as_comparator_rejects():
    error = suite.assert_raises(TypeError, lambda: as_comparator("not a comparator"), "strings cannot compare")
    assert_that("str" in str(error), f"message should name the type: {error}")


# comparing() / chaining tests

@test("comparing orders by a key")
def test_comparing():
    by_age = comparing(lambda p: p.age)
    ordered = sorted(sample_people, key=by_age.key())
    assert_that([p.name for p in ordered] == ['alice', 'charlie', 'eve', 'bob', 'diana'],
                f"unexpected order: {ordered}")


@test("comparing accepts a comparator for the key")
def test_comparing_with_comparator():
    by_city_desc = comparing(lambda p: p.city, reverse_order())
    ordered = sorted(sample_people, key=by_city_desc.key())
    assert_that([p.city for p in ordered] == ['nyc', 'nyc', 'la', 'la', 'chicago'], "cities descending")


@test("then_comparing breaks ties only")
def test_then_comparing():
    seen = []

    def by_name(a, b):
        seen.append((a.name, b.name))
        return (a.name > b.name) - (a.name < b.name)

    comparator = comparing(lambda p: p.age).then_comparing(by_name)
    alice, bob, charlie = sample_people[0], sample_people[1], sample_people[2]
    assert_that(comparator(alice, bob) < 0, "age decides first")
    assert_that(seen == [], "the tie breaker is not consulted when ages differ")
    assert_that(comparator(charlie, alice) > 0, "name breaks the age tie")
    assert_that(seen == [('charlie', 'alice')], f"tie breaker should run once: {seen}")


@test("then_comparing_by chains key comparisons")
def test_then_comparing_by():
    comparator = comparing(lambda p: p.city).then_comparing_by(lambda p: p.age, reverse_order())
    ordered = sorted(sample_people, key=comparator.key())
    assert_that([p.name for p in ordered] == ['diana', 'bob', 'eve', 'alice', 'charlie'],
                f"unexpected order: {[p.name for p in ordered]}")


@test("chains are flattened and compare by value")
def test_chain_flattening():
    by_city = comparing(len)
    first = natural().then_comparing(by_city).then_comparing(case_insensitive())
    second = natural().then_comparing(by_city.then_comparing(case_insensitive()))
    suite.assert_equality_groups([first, second], [natural().then_comparing(by_city)])
    assert_that(repr(first).count(".then_comparing(") == 2, f"chain should be flat: {first!r}")


@test("chained comparators sort generated people consistently")
def test_chain_generated():
    people = from_schema(person_schema, seed=99).take(30)
    comparator = comparing(lambda p: p['city']).then_comparing_by(lambda p: p['age']).then_comparing_by(
        lambda p: p['name'])
    ordered = sorted(people, key=comparator.key())
    expected = sorted(people, key=lambda p: (p['city'], p['age'], p['name']))
    assert_that(ordered == expected, "comparator sort should match a tuple key sort")


# case_insensitive() tests

@test("case_insensitive ignores case")
def test_case_insensitive():
    comparator = case_insensitive()
    assert_that(comparator("Apple", "apple") == 0, "case should not matter")
    assert_that(comparator("apple", "Banana") < 0, "apple sorts before banana")
    assert_that(natural()("apple", "Banana") > 0, "but not under natural order")
    assert_that(case_insensitive() == case_insensitive(), "case_insensitive is value-equal")


# value semantics

@test("comparators are hashable values")
def test_comparators_hashable():
    registry = {lexicographical(): 'lexy', empties_first(): 'empties', natural(): 'natural'}
    assert_that(registry[natural().lexicographical()] == 'lexy', "lookup by an equal comparator")
    assert_that(registry[natural().empties_first()] == 'empties', "lookup by an equal comparator")
    assert_that(len({natural(), reverse_order(), natural().reversed()}) == 2, "equal comparators collapse in a set")


@test("comparators are plain cmp callables")
def test_comparators_work_with_cmp_to_key():
    comparator = reverse_order(comparing(len))
    words = ['bb', 'a', 'ccc']
    assert_that(sorted(words, key=cmp_to_key(comparator)) == ['ccc', 'bb', 'a'], "cmp_to_key accepts it")
    assert_that(sorted(words, key=comparator.key()) == ['ccc', 'bb', 'a'], "key() gives the same order")


if __name__ == "__main__":
    suite.run(title="ordinq comparator test suite")
