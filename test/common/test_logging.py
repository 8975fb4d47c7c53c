from pheeno_ros.common.logging import LogEvent, LogLevel, log_error, log_event, log_info


def test_repeated_events_are_collapsed(logger, capsys):
    last = log_info(logger, 'Obstacle detected', 'avoid_obstacle_move()')
    last = log_info(logger, 'Obstacle detected', 'avoid_obstacle_move()', last)
    last = log_info(logger, 'Obstacle detected', 'avoid_obstacle_move()', last)

    assert logger.records == [('info', 'avoid_obstacle_move(): Obstacle detected')]
    assert last.counter == 2
    assert 'x 2' in capsys.readouterr().out


def test_new_event_resets_counter(logger):
    last = log_info(logger, 'a')
    last = log_info(logger, 'a', last_event=last)
    last = log_event(logger, LogEvent('b', 'node', LogLevel.WARN), last)

    assert last.counter == 0
    assert logger.records == [('info', 'a'), ('warning', 'node: b')]


def test_error_includes_exception(logger):
    log_error(logger, ValueError('bad channel'), '_load_parameters', 'Failed.')

    assert logger.records == [('error', 'Error in _load_parameters: bad channel. Failed.')]
