from abc import ABC, abstractmethod
import operator
import logging

from ComparisonStrategy import ComparisonStrategy


class InvalidArgumentError(ValueError):
    """Exception raised when None is passed where a list element is required."""

    pass


class IndexOutOfBoundsError(IndexError):
    """Exception raised when a positional access falls outside of the list."""

    pass


class LinkedListNode:
    """
    One link of a singly-linked chain.

    Holds an element and the node after it. Exactly one list or predecessor
    node refers to any given node.

    Attributes:
        value: The data stored in this node.
        nextNode (LinkedListNode): Reference to the next node in the list, or None for the tail.
    """
    def __init__(self,value,nextNode=None):
        """
        Create a node, optionally linked in front of an existing one.

        Args:
            value: The data to store in this node.
            nextNode (LinkedListNode, optional): The node that follows this one. Defaults to None.
        """
        self.value = value
        self.nextNode = nextNode


class LinkedList(ABC):
    """
    An abstract singly-linked list.

    Holds the chain of nodes and provides everything that does not depend on
    where a new element belongs: traversal, positional access, lookup by
    equality, removal, and clearing. Subclasses decide where "add" places
    new elements.

    Attributes:
        size (int): Number of elements in the list.
        headNode (LinkedListNode): First node in the list, or None when empty.
        logger (logging.Logger): Logger instance for list output.
    """
    loggerName = "LINKED_LIST"

    def __init__(
        self,
        logFile=None,
        logLevel=logging.WARNING,
        logger: logging.Logger = None,
    ):
        """
        Initialize an empty linked list with logging configuration.

        Args:
            logFile (str, optional): Path to log file. If None, no file logging. Defaults to None.
            logLevel (int, optional): Logging level (e.g., logging.DEBUG). Defaults to logging.WARNING.
            logger (logging.Logger, optional): Custom logger instance. If None, creates new one. Defaults to None.
        """
        if logger is None:
            self.logger = logging.getLogger(self.loggerName)
            self.logger.setLevel(logLevel)

            if logFile is not None:
                file_handler = logging.FileHandler(logFile)
                file_handler.setLevel(logLevel)

                formatter = logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                )
                file_handler.setFormatter(formatter)

                self.logger.addHandler(file_handler)
        else:
            self.logger = logger

        self.size = 0
        self.headNode = None

    @abstractmethod
    def add(self,newVal):
        """
        Add a new element to the list.

        Args:
            newVal: The value to add.
        """
        pass

    def _insertAfter(self,prevNode,newVal):
        """
        Link a new node holding newVal directly after prevNode.

        Args:
            prevNode (LinkedListNode): The node to insert after. If None, the new node becomes the head.
            newVal: The value to store in the new node.
        """
        if prevNode is None:
            self.headNode = LinkedListNode(newVal,self.headNode)
        else:
            prevNode.nextNode = LinkedListNode(newVal,prevNode.nextNode)

        self.size += 1

    def _unlinkAfter(self,prevNode):
        """
        Unlink the node that follows prevNode (or the head if prevNode is None).

        Args:
            prevNode (LinkedListNode): The predecessor of the node to drop.
        """
        if prevNode is None:
            self.headNode = self.headNode.nextNode
        else:
            prevNode.nextNode = prevNode.nextNode.nextNode

        self.size -= 1

    def isEmpty(self):
        return self.size == 0

    def remove(self,value):
        """
        Remove the first element equal to value.

        Matching uses the elements' own equality, not the list's ordering.
        An empty list returns False before the argument is validated.

        Args:
            value: The value to remove.

        Returns:
            bool: True if an element was removed, False if value was not in the list.

        Raises:
            InvalidArgumentError: If value is None and the list is not empty.
        """
        if self.isEmpty():
            return False

        if value is None:
            raise InvalidArgumentError("None is not a valid list element")

        prevNode = None
        nodei = self.headNode
        while nodei is not None and not nodei.value == value:
            prevNode = nodei
            nodei = nodei.nextNode

        if nodei is None:
            self.logger.debug("%s not found, nothing removed", value)
            return False

        self._unlinkAfter(prevNode)
        self.logger.debug("Removed %s, size is now %d", value, self.size)
        return True

    def clear(self):
        """
        Remove all elements from the list.
        """
        self.headNode = None
        self.size = 0
        self.logger.debug("Cleared list")

    def get(self,index):
        """
        Return the element at the given position.

        Walks the chain from the head, so this is linear in index.

        Args:
            index (int): Zero-based position of the element.

        Returns:
            The element at position index.

        Raises:
            TypeError: If index is not an integer.
            IndexOutOfBoundsError: If index is negative or greater than size - 1.
        """
        index = operator.index(index)
        if index < 0 or index > self.size - 1:
            raise IndexOutOfBoundsError(f"Index {index} is out of bounds for a list of size {self.size}")

        nodei = self.headNode
        for _ in range(index):
            nodei = nodei.nextNode
        return nodei.value

    def indexOf(self,value):
        """
        Return the position of the first element equal to value.

        Args:
            value: The value to search for.

        Returns:
            int: The zero-based index of the first match, or -1 if there is none.
        """
        nodei = self.headNode
        for i in range(self.size):
            if nodei.value == value:
                return i
            nodei = nodei.nextNode
        return -1

    def contains(self,value):
        return self.indexOf(value) >= 0

    def __iter__(self):
        """
        Yield the elements from head to tail.

        Every call starts a fresh traversal from the head. Modifying the list
        while a traversal is in progress is not supported.

        Returns:
            iterator: An iterator over the list values from head to tail.
        """
        nodei = self.headNode
        while nodei is not None:
            yield nodei.value
            nodei = nodei.nextNode

    def __len__(self):
        """
        Number of nodes currently linked into the chain.

        Returns:
            int: The value of size.
        """
        return self.size

    def __getitem__(self,index):
        return self.get(index)

    def __contains__(self,value):
        return self.contains(value)

    def __str__(self):
        """
        Render the list as "[a, b, c]", or "[]" when empty.
        """
        return "[" + ", ".join(str(v) for v in self) + "]"

    def __repr__(self):
        return f"{type(self).__name__}([{', '.join(repr(v) for v in self)}])"


class SortedLinkedList(LinkedList):
    """
    A LinkedList that keeps its elements in sorted order.

    Elements are ordered lowest to greatest according to one of three
    strategies, fixed at construction:
      - natural ordering of the elements (the default),
      - a cmp-style comparator(a, b) returning a negative int, zero, or a positive int,
      - the natural ordering of key(element).

    Elements that compare equal keep their insertion order: a new element is
    placed after every element it compares equal to and before the first one
    strictly greater than it.

    Attributes:
        strategy (ComparisonStrategy): The ordering strategy in use.
        (Inherits all other attributes from LinkedList)
    """
    loggerName = "SORTED_LINKED_LIST"

    def __init__(
        self,
        comparator=None,
        key=None,
        logFile=None,
        logLevel=logging.WARNING,
        logger: logging.Logger = None,
    ):
        """
        Initialize an empty sorted linked list.

        Args:
            comparator (callable, optional): Function taking two elements and returning a negative int,
                zero, or a positive int as the first is less than, equal to, or greater than the second.
                Defaults to None.
            key (callable, optional): Function to extract a sort key from elements. Defaults to None.
            logFile (str, optional): Path to log file. Defaults to None.
            logLevel (int, optional): Logging level. Defaults to logging.WARNING.
            logger (logging.Logger, optional): Custom logger. If None, creates new one. Defaults to None.

        Raises:
            ValueError: If both comparator and key are provided.
        """
        if comparator is not None and key is not None:
            raise ValueError("Provide either \"comparator\" or \"key\", not both")

        super().__init__(logFile=logFile, logLevel=logLevel, logger=logger)

        self._comparator = comparator
        self._key = key
        if comparator is not None:
            self._strategy = ComparisonStrategy.COMPARATOR
        elif key is not None:
            self._strategy = ComparisonStrategy.KEY
        else:
            self._strategy = ComparisonStrategy.NATURAL

    @property
    def strategy(self):
        return self._strategy

    def compare(self,a,b):
        """
        Compare two elements using the list's ordering strategy.

        This is the only place ordering is decided.

        Args:
            a: The first element.
            b: The second element.

        Returns:
            int: Negative, zero, or positive as a is less than, equal to, or greater than b.
        """
        if self._strategy is ComparisonStrategy.COMPARATOR:
            return self._comparator(a,b)

        if self._strategy is ComparisonStrategy.KEY:
            a = self._key(a)
            b = self._key(b)

        return int(a > b) - int(a < b)

    def add(self,newVal):
        """
        Insert a new value in the appropriate sorted position.

        Args:
            newVal: The value to insert into the sorted list.

        Raises:
            InvalidArgumentError: If newVal is None.
        """
        if newVal is None:
            raise InvalidArgumentError("None is not a valid list element")

        if self.headNode is None or self.compare(self.headNode.value,newVal) > 0:
            self._insertAfter(None,newVal)
            self.logger.debug("Inserted %s at position 0", newVal)
            return

        #Walk past every element that is less than or equal to the new value.
        nodei = self.headNode
        position = 1
        while nodei.nextNode is not None and self.compare(nodei.nextNode.value,newVal) <= 0:
            nodei = nodei.nextNode
            position += 1

        self._insertAfter(nodei,newVal)
        self.logger.debug("Inserted %s at position %d", newVal, position)
