import subprocess
import sys
import os
from datetime import datetime

from main import END_BANNER


def run_checker(argv=None):
    # 1. Forward arguments untouched; main.py validates them
    args = sys.argv[1:] if argv is None else list(argv)
    # Force unbuffered output so lines appear immediately
    cmd = [sys.executable, "-u", "main.py"] + args

    # 2. Create logs directory
    os.makedirs("logs", exist_ok=True)

    # 3. Prepare timestamped log file (machine-sortable)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_filename = f"logs/check_session_{timestamp}.txt"

    print(f"--- STARTING CHECKER WRAPPER ---")
    print(f"Log File: {log_filename}")
    print(f"Command:  {' '.join(cmd)}")
    print(f"--------------------------------\n")

    # 4. Execute main.py and capture report lines and log lines together
    full_output = []

    process = subprocess.Popen(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        bufsize=1,
        encoding="utf-8",
    )

    with open(log_filename, "w", encoding="utf-8") as f:
        f.write(f"--- Check Log: {timestamp} ---\n")
        f.write(f"--- Command: {' '.join(cmd)} ---\n\n")

        for line in process.stdout:
            sys.stdout.write(line)
            sys.stdout.flush()
            f.write(line)
            f.flush()
            full_output.append(line)

    process.wait()

    # 5. A session without the end banner did not finish its range
    completed = any(END_BANNER in line for line in full_output)

    with open(log_filename, "a", encoding="utf-8") as f:
        f.write(f"\n--- PROCESS EXIT CODE: {process.returncode} ---\n")
        if not completed:
            f.write("--- END BANNER NOT FOUND: SESSION INCOMPLETE ---\n")

    if process.returncode != 0:
        print(f"\nChecker exited with non-zero status code: {process.returncode}")
        return process.returncode

    if not completed:
        print("\n" + "!" * 40)
        print("ERROR: Check finished without its end banner.")
        print("!" * 40)
        return 1

    print(f"\n--- WRAPPER COMPLETED SUCCESSFULLY ---")
    return 0


if __name__ == "__main__":
    sys.exit(run_checker())
