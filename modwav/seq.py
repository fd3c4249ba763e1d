"""Row-by-row walk of the order table with the speed/jump/break effects.

Each step consumes one pattern row: note triggers update the channel
state, control effects are scheduled, and the row's length in output
frames is worked out from the speed and tempo latched by the previous
row (modformat.txt rev 4: rows/minute = 24*bpm/ticks).
"""
import logging

from .conf import SR,SPEED,BPM,ROWS,POSITION_JUMP,PATTERN_BREAK,SET_SPEED
from .errors import flag

log=logging.getLogger(__name__)

class Chan:
 """Playback state of one output channel; period 0 = silent."""
 __slots__=('inst','period','pos')
 def __init__(self):self.inst=self.period=self.pos=0
 def __repr__(self):return f"Chan(inst={self.inst}, period={self.period}, pos={self.pos})"

class Line:
 """One rendered row: where it came from, how long it lasts, what sounds."""
 __slots__=('order','pattern','row','frames','notes')
 def __init__(self,order,pattern,row,frames,notes):
  self.order=order;self.pattern=pattern;self.row=row
  self.frames=frames;self.notes=notes     # ((ch, period, inst), ...)
 def __repr__(self):
  return f"Line({self.order}({self.pattern}):{self.row}, {self.frames} frames, {self.notes})"

def row_frames(bpm,spd,rate=SR):
 rows_per_minute=24.0*bpm/spd
 return int(round(rate*60.0/rows_per_minute))

class Sequencer:
 def __init__(self,module,rate=SR,loop_guard=True):
  self.mod=module;self.rate=rate;self.loop_guard=loop_guard
  self.ch=[Chan() for _ in range(module.channels)]
  self.op=self.row=0
  self.spd=self._nspd=SPEED
  self.bpm=self._nbpm=BPM
  self.diags=[]
  self.ended=not module.table

 def _where(self):return (self.op,self.mod.table[self.op],self.row)

 def _info(self,fmt,*a):
  if log.isEnabledFor(logging.DEBUG):
   o,p,r=self._where()
   log.debug('%2d(%2d):%2d: '+fmt,o,p,r,*a)

 def _trigger(self,cells):
  for c,n in zip(self.ch,cells):
   if n.period:c.period=n.period;c.pos=0
   if n.inst:c.inst=n.inst

 def _effects(self,cells):
  """Scan the row in channel order -> (jump target or None, break row or None)."""
  jump=brk=None
  for n in cells:
   e,p=n.eff,n.prm
   if e==SET_SPEED:
    if p==0:flag(self.diags,log,'speed_zero','ignored tickrate 0',self._where())
    elif p<=31:self._nspd=p;self._info('Set tickrate to %d',p)
    else:self._nbpm=p;self._info('Set bpm to %d',p)
   elif e==POSITION_JUMP:
    self._info('Saw position jump (value %d)',p)
    if p>self.op or not self.loop_guard:jump=p
    else:flag(self.diags,log,'loop_jump',f'position jump to {p} ignored (probable infinite loop)',self._where())
   elif e==PATTERN_BREAK:
    brk=n.hi*10+n.lo
    self._info('Saw pattern break (row %d)',brk)
  return jump,brk

 def _advance(self,jump,brk):
  self.row+=1
  self.spd=self._nspd;self.bpm=self._nbpm
  if brk is not None:self.op+=1;self.row=brk
  if jump is not None:self.op=jump;self.row=0
  if self.row>=ROWS:self.row=0;self.op+=1
  if self.op>=len(self.mod.table):self.ended=True

 def step(self):
  """Play one row. Returns its Line, or None once past the end of the table."""
  if self.ended:return None
  pat=self.mod.table[self.op]
  cells=self.mod.patterns[pat][self.row]
  self._trigger(cells)
  jump,brk=self._effects(cells)
  line=Line(self.op,pat,self.row,row_frames(self.bpm,self.spd,self.rate),
            tuple((i,c.period,c.inst) for i,c in enumerate(self.ch) if c.period))
  self._advance(jump,brk)
  return line

 def __iter__(self):
  while True:
   line=self.step()
   if line is None:return
   yield line
