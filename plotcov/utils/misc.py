import logging
import os


def get_logger(logpath, filepath, package_files=(), displaying=True,
               saving=True, debug=False, name=None):
    """
    Set up a logger writing to logpath and to the console.

    The source of the running script (filepath) and of any package_files
    is logged first so every log records the code that produced it.
    Handlers already attached to the logger are closed and replaced.
    """
    logger = logging.getLogger(name)
    if debug:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logger.setLevel(level)

    # handlers from an earlier call would keep writing to the old log file
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    if saving:
        logdir = os.path.dirname(logpath)
        if logdir:
            os.makedirs(logdir, exist_ok=True)
        info_file_handler = logging.FileHandler(logpath, mode='a')
        info_file_handler.setLevel(level)
        logger.addHandler(info_file_handler)
    if displaying:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    logger.info(filepath)
    with open(filepath, 'r') as f:
        logger.info(f.read())

    for f in package_files:
        logger.info(f)
        with open(f, 'r') as package_f:
            logger.info(package_f.read())

    return logger
