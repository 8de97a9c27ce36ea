import re

import click

_version_msg = """\
peekiter {version}
License GPLv3+: GNU GPL version 3 or later <http://gnu.org/licenses/gpl.html>
This is free software: you are free to change and redistribute it.
There is NO WARRANTY, to the extent permitted by law."""


@click.group()
@click.option(
    '--capacity',
    default=None,
    envvar='PEEKITER_CAPACITY',
    type=click.IntRange(min=1),
    help='The most lines to buffer from each end. By default the buffer'
    ' grows as needed.',
)
@click.option(
    '--verbose/--quiet',
    default=False,
    help='Print additional information while running?',
)
@click.pass_context
def main(ctx, capacity, verbose):
    """Look ahead into, and back from the end of, line oriented input.
    """
    ctx.obj = {
        'capacity': capacity,
        'verbose': verbose,
    }


def log_missing(verbose, offset, back):
    if verbose:
        click.echo(
            'no line at offset %d from the %s' % (
                offset,
                'back' if back else 'front',
            ),
            err=True,
        )


def log_stopped(verbose, line):
    if verbose:
        if line is None:
            click.echo('input exhausted', err=True)
        else:
            click.echo('stopped at %r' % line, err=True)


def log_matched(verbose, count):
    if verbose:
        click.echo('%d matching lines left in place' % count, err=True)


def _open_buffer(ctx, file, back):
    """Wrap the lines of ``file`` in a peek buffer.

    Parameters
    ----------
    ctx : click.Context
        The context holding the ``--capacity`` option.
    file : file
        The open input.
    back : bool
        Will the lines be read from the back? The whole file is read into
        memory when this is true, otherwise the lines are streamed.

    Returns
    -------
    buffer : PeekableIterator or DoubleEndedPeekableIterator
        The buffer over the lines with their line endings stripped.
    """
    from peekiter import (
        double_ended,
        fixed_double_ended,
        fixed_forward,
        forward,
    )

    capacity = ctx.obj['capacity']
    if back:
        lines = file.read().splitlines()
        if capacity is None:
            return double_ended(lines)
        return fixed_double_ended(lines, capacity, capacity)

    lines = (line.rstrip('\r\n') for line in file)
    if capacity is None:
        return forward(lines)
    return fixed_forward(lines, capacity)


@main.command()
def version():
    """Print version and license information.
    """
    from peekiter import __version__

    click.echo(_version_msg.format(version=__version__))


@main.command()
@click.argument('file', type=click.File('r'))
@click.option(
    '-n',
    '--offset',
    'offsets',
    multiple=True,
    default=[0],
    type=click.IntRange(min=0),
    help='The offset of a line to print. May be passed more than once.',
)
@click.option(
    '--back',
    is_flag=True,
    help='Count offsets from the last line instead of the first.',
)
@click.pass_context
def peek(ctx, file, offsets, back):
    """Print the lines at the given offsets.
    """
    buf = _open_buffer(ctx, file, back)
    peek_nth = buf.peek_back_nth if back else buf.peek_nth

    for offset in offsets:
        line = peek_nth(offset)
        if line is None:
            log_missing(ctx.obj['verbose'], offset, back)
            continue
        click.echo(line)


@main.command('range')
@click.argument('file', type=click.File('r'))
@click.argument('start', type=click.IntRange(min=0))
@click.argument('stop', type=click.IntRange(min=0), required=False)
@click.option(
    '--back',
    is_flag=True,
    help='Count offsets from the last line instead of the first.',
)
@click.pass_context
def range_(ctx, file, start, stop, back):
    """Print the lines at offsets START up to, but not including, STOP.
    """
    buf = _open_buffer(ctx, file, back)
    peek_range = buf.peek_back_range if back else buf.peek_range

    try:
        lines = peek_range(start, stop)
    except ValueError as e:
        ctx.fail(str(e))

    for line in lines:
        click.echo(line)


@main.command('take-while')
@click.argument('file', type=click.File('r'))
@click.argument('pattern')
@click.option(
    '--back',
    is_flag=True,
    help='Take lines from the end instead of the start.',
)
@click.option(
    '--peek/--consume',
    'peek_only',
    default=False,
    help='Leave the matching lines in the buffer?',
)
@click.pass_context
def take_while(ctx, file, pattern, back, peek_only):
    """Print the leading lines that match the regular expression PATTERN.
    """
    try:
        regex = re.compile(pattern)
    except re.error as e:
        ctx.fail('invalid pattern %r: %s' % (pattern, e))

    def predicate(line):
        return regex.search(line) is not None

    buf = _open_buffer(ctx, file, back)
    if peek_only:
        take = buf.while_peek_back if back else buf.while_peek
    else:
        take = buf.while_next_back if back else buf.while_next

    count = 0
    for line in take(predicate):
        click.echo(line)
        count += 1

    verbose = ctx.obj['verbose']
    if peek_only:
        log_matched(verbose, count)
    else:
        log_stopped(verbose, buf.peek_back() if back else buf.peek())


if __name__ == '__main__':
    main()
