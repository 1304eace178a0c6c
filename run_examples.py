from sortedsearch import binary_search_index, contains, equal_range
from sortedsearch.logger.logger import logger


def binary_search_example():
    data = [2, 4, 6, 8, 10]

    result = binary_search_index(data, 6)

    if result is not None:
        logger.info("Value found at index: %d", result)
    else:
        logger.info("Value not found")


def bounds_example():
    data = [1, 2, 2, 2, 5, 7]

    lb, ub = equal_range(data, 2)

    logger.info("Lower bound index: %d", lb)
    logger.info("Upper bound index: %d", ub)


def contains_example():
    data = [5, 10, 15, 20]

    logger.info("15 exists: %s", contains(data, 15))
    logger.info("17 exists: %s", contains(data, 17))


if __name__ == "__main__":
    binary_search_example()
    bounds_example()
    contains_example()
