"""python -m modwav FILE [-o OUT] ..."""
import argparse,logging,sys
from pathlib import Path

from . import __version__
from .conf import SR,MAX_SECONDS
from .dump import dump,summary
from .errors import ModError
from .mix import render
from .mod import load

def play(wav):
 try:import sounddevice as sd
 except (ImportError,OSError):sys.exit('pip install sounddevice')
 sd.play(wav.data,wav.rate);sd.wait()

def _seconds(v):
 f=float(v)
 if f<=0:raise argparse.ArgumentTypeError(f'must be positive, got {v}')
 return f

def main(argv=None):
 ap=argparse.ArgumentParser(prog='modwav',description='Render a MOD module to WAV.')
 ap.add_argument('file')
 ap.add_argument('-o','--out',help='output path (default: FILE.wav)')
 ap.add_argument('-r','--rate',type=int,default=SR)
 ap.add_argument('--max-seconds',type=_seconds,default=MAX_SECONDS)
 ap.add_argument('--no-loop-guard',action='store_true',help='take backward position jumps too')
 ap.add_argument('--dump',action='store_true',help='print patterns and instruments')
 ap.add_argument('--play',action='store_true',help='play the result when done')
 v=ap.add_mutually_exclusive_group()
 v.add_argument('-v','--verbose',action='store_true')
 v.add_argument('-q','--quiet',action='store_true')
 ap.add_argument('--version',action='version',version=f'modwav {__version__}')
 a=ap.parse_args(argv)
 logging.basicConfig(level=logging.DEBUG if a.verbose else logging.ERROR if a.quiet else logging.INFO,
                     format='%(levelname)s: %(message)s')
 try:m=load(a.file)
 except (ModError,OSError) as e:
  print(f'error: {e}',file=sys.stderr);return 1
 print(dump(m) if a.dump else summary(m))
 r=render(m,a.rate,not a.no_loop_guard,a.max_seconds)
 out=Path(a.out or a.file+'.wav')
 try:r.wav.save(out)
 except (OSError,RuntimeError) as e:
  print(f'error: {e}',file=sys.stderr);return 1
 print(f'{out}: {r.seconds:.2f}s, {len(r.diags)+len(m.diags)} warnings')
 if a.play:play(r.wav)
 return 0

if __name__=='__main__':sys.exit(main())
