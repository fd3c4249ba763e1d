"""Channel mixing and the load -> sequence -> resample -> mix pipeline."""
import logging

import numpy as np

from .conf import SR,PAN,MAX_SECONDS,TAIL_SECONDS
from .errors import flag
from .resample import Cache
from .seq import Sequencer
from .wav import Wav

log=logging.getLogger(__name__)

def _play(c,s,w,n):
 """Advance channel c over n frames of waveform w. Returns frame indices into w.

 Past the end: jump to the loop start (loop_start*2 frames) when the
 instrument loops, otherwise the channel falls silent."""
 W=len(w);p=c.pos
 a=min(n,max(0,W-p))
 idx=np.arange(p,p+a,dtype=np.int64);p+=a
 r=n-a
 if r:
  st=s.loop_start*2
  if s.loop_len>1 and st<W:
   span=W-st
   idx=np.concatenate((idx,st+np.arange(r,dtype=np.int64)%span))
   p=st+(r-1)%span+1
  else:c.period=0
 c.pos=p
 return idx

class Mixer:
 """One stereo buffer per channel, summed at the end."""
 def __init__(self,module,rate=SR):
  self.mod=module;self.rate=rate
  self.cache=Cache(module,rate)
  self.bufs=[Wav(0,rate) for _ in range(module.channels)]
  self.frame=0

 def channel(self,ch,c,n):
  if not c.period or not 0<c.inst<len(self.mod.instruments):return
  s=self.mod.instruments[c.inst]
  if s is None or not s.real:return
  w=self.cache.get(c.inst,c.period)
  idx=_play(c,s,w,n)
  if not len(idx):return
  lg,rg=PAN[ch%4]
  b=self.bufs[ch]
  b.grow(self.frame+len(idx))
  b.write(self.frame,w[idx]*np.array((lg,rg),dtype=np.float32))

 def line(self,chans,n):
  for ch,c in enumerate(chans):self.channel(ch,c,n)
  self.frame+=n

 def final(self,tail=TAIL_SECONDS):
  out=Wav(self.frame+int(tail*self.rate),self.rate)
  for b in self.bufs:out.add(0,b,0,out.frame_count(),1.0,0.0)
  return out

class Render:
 __slots__=('wav','frames','lines','diags')
 def __init__(self,wav,frames,lines,diags):
  self.wav=wav;self.frames=frames;self.lines=lines;self.diags=diags
 @property
 def seconds(self):return self.frames/self.wav.rate

def render(module,rate=SR,loop_guard=True,max_seconds=MAX_SECONDS,tail=TAIL_SECONDS):
 """Play module through once. Returns a Render holding the stereo Wav."""
 if max_seconds<=0:raise ValueError(f"max_seconds must be positive, got {max_seconds}")
 seq=Sequencer(module,rate,loop_guard)
 mx=Mixer(module,rate)
 cap=int(max_seconds*rate);lines=0
 for line in seq:
  room=cap-mx.frame
  if line.frames>room:
   flag(seq.diags,log,'runtime',f'stopped at the {max_seconds}s render limit',(line.order,line.pattern,line.row))
   mx.line(seq.ch,room);lines+=1
   break
  mx.line(seq.ch,line.frames);lines+=1
 log.info('rendered %d rows, %.2fs, %d resampled waveforms',lines,mx.frame/rate,len(mx.cache))
 return Render(mx.final(tail),mx.frame,lines,seq.diags)
