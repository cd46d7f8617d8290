"""HTML, CSS and script templates for the rendered documents.

Templates use ``string.Template`` placeholders; the scripts therefore never
contain a dollar sign. The schedule and visibility functions in
``SCHEDULE_SCRIPT`` mirror ``circlesketch.core.schedule`` and are the only
in-page copy of that logic, shared by the full page and the embed.
"""

from string import Template

STYLE = """
.circles-sketch { position: relative; max-width: 720px; margin: 0 auto; }
.circles-sketch svg { width: 100%; height: auto; background: #111; display: block; }
.circles-sketch .contour { fill: none; stroke: #ccc; }
.circles-sketch .circle { fill: none; stroke: #6cf; stroke-opacity: 0.5; }
.circles-sketch .arm { stroke: #6cf; stroke-opacity: 0.7; }
.circles-sketch .trace { fill: none; stroke-linecap: round; stroke-linejoin: round; }
.circles-sketch .point { fill: white; }
.circles-sketch .nh { fill: #eee; font-family: sans-serif; }
"""

PAGE_STYLE = """
body { background: #222; color: #ddd; font-family: sans-serif; margin: 1em; }
.controls { max-width: 720px; margin: 1em auto; display: grid;
  grid-template-columns: max-content 1fr; gap: 0.4em 1em; align-items: center; }
.controls input[type=text] { width: 100%; font-family: monospace; }
.controls input.invalid { background: #633; }
.command { max-width: 720px; margin: 1em auto; font-family: monospace; color: #999; }
table.coefficients { margin: 1em auto; border-collapse: collapse; font-family: monospace; }
table.coefficients td, table.coefficients th { padding: 0 0.8em; text-align: right; }
"""

SCHEDULE_SCRIPT = """
var CirclesSchedule = (function () {
  var MAX_LOOPS = 10000;

  function rangeFor(ranges, count) {
    for (var k = 0; k < ranges.length; k++) {
      if (ranges[k].from <= count && count < ranges[k].to) return ranges[k];
    }
    return null;
  }

  function nextRangeStart(ranges, count) {
    for (var k = 0; k + 1 < ranges.length; k++) {
      if (ranges[k].to <= count && count < ranges[k + 1].from) return ranges[k + 1].from;
    }
    return null;
  }

  function buildLoops(ranges, cap, maxLoops) {
    maxLoops = maxLoops || MAX_LOOPS;
    var loops = [];
    var i = ranges.length ? ranges[0].from : 1;
    while (true) {
      var active = rangeFor(ranges, i);
      var speed = active ? active.speed : 1.0;
      var count = Math.min(i, cap);
      if (loops.length === maxLoops - 1) count = cap;
      loops.push([count, speed]);
      if (count >= cap) return loops;
      if (active) { i += active.step; continue; }
      var next = nextRangeStart(ranges, i);
      if (next === null) { loops.push([cap, speed]); return loops; }
      i = next;
    }
  }

  function isInteger(v) { return isFinite(v) && Math.floor(v) === v; }

  // Returns null when the text is not a valid schedule
  function parseSteps(text) {
    var ranges = [];
    var groups = text.split(";");
    for (var g = 0; g < groups.length; g++) {
      var group = groups[g].trim();
      if (!group) continue;
      var parts = group.split(/\\s+/);
      if (parts.length !== 4) return null;
      var v = parts.map(Number);
      if (!isInteger(v[0]) || !isInteger(v[1]) || !isInteger(v[2]) || !isFinite(v[3])) return null;
      if (v[0] < 1 || v[1] < 1 || v[2] <= v[0] || !(v[3] > 0)) return null;
      if (ranges.length && v[0] < ranges[ranges.length - 1].to) return null;
      ranges.push({from: v[0], step: v[1], to: v[2], speed: v[3]});
    }
    return ranges;
  }

  function isVisible(predicate, loopIndex) {
    if (predicate.kind === "always") return true;
    if (predicate.kind === "never") return false;
    return predicate.residues.indexOf(loopIndex % predicate.modulo) >= 0;
  }

  return {buildLoops: buildLoops, parseSteps: parseSteps, isVisible: isVisible};
})();
"""

ANIMATION_SCRIPT = """
function CirclesSketch(root, data) {
  var NS = "http://www.w3.org/2000/svg";
  var contour = root.querySelector(".contour");
  var circlesGroup = root.querySelector(".circles");
  var trace = root.querySelector(".trace");
  var point = root.querySelector(".point");
  var nhLabel = root.querySelector(".nh");

  var state = {
    t: 0, loopIndex: 0, running: true, last: null,
    loops: data.loops,
    predicates: {
      contour: data.predicates.contour,
      trace: data.predicates.trace,
      circles: data.predicates.circles
    },
    traceLength: data.display.trace_length,
    showPoint: data.display.show_point,
    showNh: data.display.show_nh,
    trail: []
  };

  var circleEls = [];
  var armEls = [];
  for (var k = 0; k < data.cap; k++) {
    var c = document.createElementNS(NS, "circle");
    c.setAttribute("class", "circle");
    c.setAttribute("stroke-width", data.dotR * 0.2);
    circlesGroup.appendChild(c);
    circleEls.push(c);
    var a = document.createElementNS(NS, "line");
    a.setAttribute("class", "arm");
    a.setAttribute("stroke-width", data.dotR * 0.2);
    circlesGroup.appendChild(a);
    armEls.push(a);
  }

  function currentLoop() {
    return state.loops[Math.min(state.loopIndex, state.loops.length - 1)];
  }

  function draw() {
    var loop = currentLoop();
    var h = loop[0];
    var x = 0, y = 0;
    var showCircles = CirclesSchedule.isVisible(state.predicates.circles, state.loopIndex);
    for (var k = 0; k < data.cap; k++) {
      var visible = showCircles && k < h;
      if (k < h) {
        var cf = data.coefficients[k];
        var angle = 2 * Math.PI * cf.freq * state.t;
        var cos = Math.cos(angle), sin = Math.sin(angle);
        var nx = x + cf.re * cos - cf.im * sin;
        var ny = y + cf.im * cos + cf.re * sin;
        if (visible && cf.freq !== 0) {
          circleEls[k].setAttribute("cx", x);
          circleEls[k].setAttribute("cy", y);
          circleEls[k].setAttribute("r", cf.r);
          armEls[k].setAttribute("x1", x);
          armEls[k].setAttribute("y1", y);
          armEls[k].setAttribute("x2", nx);
          armEls[k].setAttribute("y2", ny);
        }
        x = nx; y = ny;
      }
      var shown = visible && data.coefficients[k].freq !== 0;
      circleEls[k].style.display = shown ? "" : "none";
      armEls[k].style.display = shown ? "" : "none";
    }

    state.trail.push([x, y]);
    var maxTrail = Math.max(1, Math.round(state.traceLength * data.points.length));
    while (state.trail.length > maxTrail) state.trail.shift();
    trace.setAttribute("points", state.trail.map(function (p) { return p[0] + "," + p[1]; }).join(" "));
    trace.setAttribute("stroke", data.display.trace_colors[state.loopIndex % data.display.trace_colors.length]);
    trace.style.display = CirclesSchedule.isVisible(state.predicates.trace, state.loopIndex) ? "" : "none";
    contour.style.display = CirclesSchedule.isVisible(state.predicates.contour, state.loopIndex) ? "" : "none";

    point.setAttribute("cx", x);
    point.setAttribute("cy", y);
    point.setAttribute("r", data.dotR * (0.8 + 0.4 * Math.random()));
    point.style.display = state.showPoint ? "" : "none";

    nhLabel.textContent = h + (h === 1 ? " harmonic" : " harmonics");
    nhLabel.style.display = state.showNh ? "" : "none";
  }

  function frame(now) {
    if (!state.running) { state.last = null; return; }
    if (state.last !== null) {
      var dt = (now - state.last) / 1000;
      state.t += dt * currentLoop()[1] * 0.1;
      while (state.t >= 1) {
        state.t -= 1;
        state.loopIndex += 1;
        state.trail = [];
      }
      if (root.onTick) root.onTick(state);
    }
    state.last = now;
    draw();
    window.requestAnimationFrame(frame);
  }

  var api = {
    state: state,
    draw: draw,
    start: function () {
      if (state.running) return;
      state.running = true;
      window.requestAnimationFrame(frame);
    },
    stop: function () { state.running = false; },
    setSchedule: function (ranges) {
      state.loops = CirclesSchedule.buildLoops(ranges, data.cap);
      state.loopIndex = 0;
      state.t = 0;
      state.trail = [];
    }
  };
  window.requestAnimationFrame(frame);
  return api;
}
"""

SKETCH_TEMPLATE = Template("""<div class="circles-sketch" id="${sketch_id}">
<svg xmlns="http://www.w3.org/2000/svg" viewBox="${view_box}">
<path class="contour" d="${svg_path}" stroke-width="${contour_width}"/>
<g class="circles"></g>
<polyline class="trace" stroke-width="${trace_width}" stroke-opacity="${opacity}"/>
<circle class="point" r="${dot_r}"/>
<text class="nh" x="${label_x}" y="${label_y}" font-size="${label_size}"></text>
</svg>
</div>""")

EMBED_TEMPLATE = Template("""${sketch}
<style>${style}</style>
<script>${schedule_script}${animation_script}
(function () {
  var data = ${data};
  CirclesSketch(document.getElementById("${sketch_id}"), data);
})();
</script>
""")

PAGE_TEMPLATE = Template("""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>${title}</title>
<style>${style}${page_style}</style>
</head>
<body>
${sketch}
<div class="controls">
  <label for="time">Time</label>
  <input type="range" id="time" min="0" max="1000" value="0">
  <span>Animation</span>
  <span><button id="start">Start</button> <button id="stop">Stop</button></span>
  <label for="steps">Steps</label>
  <input type="text" id="steps" value="${schedule_text}">
  <label for="show-contour">Contour</label>
  <select id="show-contour">${contour_options}</select>
  <label for="show-trace">Trace</label>
  <select id="show-trace">${trace_options}</select>
  <label for="show-circles">Circles</label>
  <select id="show-circles">${circles_options}</select>
  <label for="opacity">Opacity</label>
  <input type="range" id="opacity" min="0" max="1" step="0.01" value="${opacity}">
  <label for="trace-length">Trace length</label>
  <input type="range" id="trace-length" min="0" max="1" step="0.01" value="${trace_length}">
  <label for="trace-width">Trace width</label>
  <input type="range" id="trace-width" min="${width_min}" max="${width_max}" step="${width_step}" value="${trace_width}">
  <label for="contour-width">Contour width</label>
  <input type="range" id="contour-width" min="${width_min}" max="${width_max}" step="${width_step}" value="${contour_width}">
  <label for="show-point">Point</label>
  <input type="checkbox" id="show-point"${show_point_checked}>
  <label for="show-nh">Harmonics label</label>
  <input type="checkbox" id="show-nh"${show_nh_checked}>
  <span>Coefficients</span>
  <span><button id="toggle-coefficients">Show / hide</button></span>
</div>
<table class="coefficients" id="coefficients" hidden>
<tr><th>#</th><th>freq</th><th>re</th><th>im</th><th>radius</th></tr>
${coefficient_rows}
</table>
<div class="command">Generated by<br/>${command}</div>
<script>${schedule_script}${animation_script}
(function () {
  var data = ${data};
  var root = document.getElementById("${sketch_id}");
  var sketch = CirclesSketch(root, data);
  var byId = function (id) { return document.getElementById(id); };
  var svg = root.querySelector("svg");

  var slider = byId("time");
  root.onTick = function (state) { slider.value = Math.round(state.t * 1000); };
  slider.addEventListener("input", function () {
    sketch.state.t = slider.value / 1000;
    sketch.state.trail = [];
    sketch.draw();
  });
  byId("start").addEventListener("click", sketch.start);
  byId("stop").addEventListener("click", sketch.stop);

  byId("steps").addEventListener("change", function () {
    var ranges = CirclesSchedule.parseSteps(this.value);
    this.classList.toggle("invalid", ranges === null);
    if (ranges !== null) sketch.setSchedule(ranges);
  });

  [["show-contour", "contour"], ["show-trace", "trace"], ["show-circles", "circles"]].forEach(function (pair) {
    byId(pair[0]).addEventListener("change", function () {
      var value = this.value;
      sketch.state.predicates[pair[1]] = value === "configured"
        ? data.predicates[pair[1]]
        : {kind: value};
    });
  });

  byId("opacity").addEventListener("input", function () {
    svg.querySelector(".trace").setAttribute("stroke-opacity", this.value);
  });
  byId("trace-length").addEventListener("input", function () {
    sketch.state.traceLength = Number(this.value);
  });
  byId("trace-width").addEventListener("input", function () {
    svg.querySelector(".trace").setAttribute("stroke-width", this.value);
  });
  byId("contour-width").addEventListener("input", function () {
    svg.querySelector(".contour").setAttribute("stroke-width", this.value);
  });
  byId("show-point").addEventListener("change", function () {
    sketch.state.showPoint = this.checked;
  });
  byId("show-nh").addEventListener("change", function () {
    sketch.state.showNh = this.checked;
  });
  byId("toggle-coefficients").addEventListener("click", function () {
    var table = byId("coefficients");
    table.hidden = !table.hidden;
  });
})();
</script>
</body>
</html>
""")
