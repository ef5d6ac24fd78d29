from os import isatty
from sys import stdin, stdout, stderr, exit
from argparse import ArgumentParser, ArgumentTypeError, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory
import regex

from .calculator import Calculator
from .converter import to_postfix
from .engine import Status
from .graph import Graph
from .lexer import Lexer
from .tokens import SPELLINGS, dump
from .validator import Validator


class InteractiveInput:
    '''
    Lines typed at a prompt, with completion of function names.

    History lasts for the session only.
    '''
    WORDS = sorted(spelling
                   for spelling in SPELLINGS
                   if len(spelling) > 1)

    def __init__(self, prompt, input=None, output=None):
        self.prompt = prompt
        # None means the terminal.
        self.input = input
        self.output = output

    def __iter__(self):
        session = PromptSession(message=self.prompt,
                                history=InMemoryHistory(),
                                completer=WordCompleter(self.WORDS),
                                complete_while_typing=False,
                                enable_suspend=True,
                                input=self.input,
                                output=self.output)
        while True:
            try:
                yield session.prompt()
            except EOFError:
                return


def _number(text):
    '''
    argparse type for x: same rules as setting x from the prompt.
    '''
    if not Validator().validate_number(text):
        raise ArgumentTypeError('not a number: {!r}'.format(text))
    return float(text)


class CLI:
    '''
    Command line interface to the calculator and grapher.
    '''

    DEFAULT_PROMPT = '> '
    DEFAULT_AXIS = [str(bound) for bound in Graph.DEFAULT_AXIS]
    # x = 1.5 at the prompt rebinds x instead of evaluating.
    ASSIGNMENT = r'\s*x\s*=(?<value>.*)'

    def executor(self):
        '''
        Evaluate each line and print the result.
        '''
        calculator = Calculator(x=self.args.x)
        for line in self.args.expressions:
            line = line.rstrip('\n')
            assignment = regex.fullmatch(type(self).ASSIGNMENT, line)
            if assignment:
                label = calculator.set_x(assignment.group('value'),
                                         calculator.format(calculator.x))
                print('x =', label.strip())
            else:
                print(calculator.calculate(line))

    def dumper(self):
        '''
        Dump tokens and postfix order of each line.
        '''
        validator = Validator()
        lexer = Lexer()
        print('<repr(line)>\t<tokens>\t<postfix>')
        for line in self.args.expressions:
            line = line.rstrip('\n')
            if not validator.validate(line):
                print(repr(line), Calculator.MESSAGES[Status.INPUT_ERROR],
                      sep='\t')
                continue
            tokens = lexer.tokenize(validator.trim(line), self.args.x)
            print(repr(line), dump(tokens), dump(to_postfix(tokens)),
                  sep='\t')

    def grapher(self):
        '''
        Print tab separated x, y points of each line over the x range.
        '''
        graph = Graph()
        for line in self.args.expressions:
            line = line.rstrip('\n')
            message = graph.check(line)
            message = graph.set_axis(message,
                                     *self.args.x_range, *self.args.y_range)
            if message:
                print(message, file=stderr)
                continue
            for x, y in graph.calculate(line):
                print(round(x, 8), round(y, Calculator.PRECISION), sep='\t')

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return an interactive prompt session, or plain stdin lines.

        Prompts if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Expression calculator and grapher')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-x', '--x', type=_number,
                                          default=0.0,
                                          help='value of the variable x')
        self.argument_parser.add_argument('--x-range', nargs=2,
                                          metavar=('MIN', 'MAX'),
                                          default=self.DEFAULT_AXIS)
        self.argument_parser.add_argument('--y-range', nargs=2,
                                          metavar=('MIN', 'MAX'),
                                          default=self.DEFAULT_AXIS)
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper),
                                      ('-g', '--graph', self.grapher)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format='%(name)s: %(message)s',
            stream=stderr)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
